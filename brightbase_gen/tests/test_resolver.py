import pytest

from brightbase_gen.pipeline import BindingCollisionError, BindingResolver, InvalidBindingNameError, PipelineGenerator
from brightbase_gen.pipeline.extractor import RpcDescriptor, SchemaEntries, TableDescriptor, extract_entries


def _tables(*names):
    return SchemaEntries(tables=tuple(extract_entries("\n".join(f"{n}: {{ Row: {{ id: string }} }}" for n in names)).tables))


class TestBindingResolver:
    """Test cases for the duplicate and collision policy"""

    def test_valid_entries_pass_through(self):
        entries = _tables("users", "posts")

        assert BindingResolver().resolve(entries) is entries

    def test_duplicate_table_key(self):
        with pytest.raises(BindingCollisionError) as exc_info:
            BindingResolver().resolve(_tables("users", "users"))

        assert exc_info.value.name == "users"

    def test_keys_normalizing_to_same_binding(self):
        with pytest.raises(BindingCollisionError) as exc_info:
            BindingResolver().resolve(_tables("user_roles", '"user-roles"'))

        assert exc_info.value.name == "UserRoles"
        assert exc_info.value.sources == ["user_roles", "user-roles"]
        assert "'user_roles'" in str(exc_info.value)

    def test_derived_type_names_collide(self):
        """`users_create_options` would redeclare the interface generated for `users`."""
        with pytest.raises(BindingCollisionError) as exc_info:
            BindingResolver().resolve(_tables("users", "users_create_options"))

        assert exc_info.value.name == "UsersCreateOptions"

    def test_imported_name_collides(self):
        with pytest.raises(BindingCollisionError) as exc_info:
            BindingResolver().resolve(_tables("bright_table"))

        assert exc_info.value.name == "BrightTable"

    @pytest.mark.parametrize("table, binding", [("omit", "Omit"), ("parameters", "Parameters")])
    def test_global_type_name_collides(self, table, binding):
        """A table must not shadow a utility type used by its own declarations."""
        with pytest.raises(BindingCollisionError) as exc_info:
            BindingResolver().resolve(_tables(table))

        assert exc_info.value.name == binding
        assert exc_info.value.sources == ["<global>", table]

    def test_generator_rejects_global_type_names(self):
        with pytest.raises(BindingCollisionError):
            PipelineGenerator("omit: { Row: { id: string } }\nparameters: { Row: { id: string } }").generate()

    @pytest.mark.parametrize("name", ["_", '"2fa_codes"'])
    def test_invalid_binding_name(self, name):
        entries = SchemaEntries(tables=tuple(extract_entries(f"{name}: {{ Row: {{}} }}").tables))

        with pytest.raises(InvalidBindingNameError):
            BindingResolver().resolve(entries)

    def test_duplicate_function_name(self):
        rpc = RpcDescriptor("ping", "Record<PropertyKey, never>", "string")

        with pytest.raises(BindingCollisionError):
            BindingResolver().resolve(SchemaEntries(rpc_functions=(rpc, rpc)))

    def test_empty_entries(self):
        assert BindingResolver().resolve(SchemaEntries()).is_empty()

    def test_generator_fails_before_emitting(self):
        with pytest.raises(BindingCollisionError):
            PipelineGenerator("users: { Row: {} }\nUsers: { Row: {} }").generate()

    def test_table_and_function_may_share_a_name(self):
        entries = SchemaEntries(
            tables=(TableDescriptor("ping", "Ping"),),
            rpc_functions=(RpcDescriptor("ping", "Record<PropertyKey, never>", "string"),),
        )

        assert BindingResolver().resolve(entries) is entries
