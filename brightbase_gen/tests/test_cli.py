#!/usr/bin/env python3

import json
import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from brightbase_gen.brightbase_gen import brightbase_gen

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def native_project(tmp_path):
    (tmp_path / "types").mkdir()
    shutil.copy(TEST_DATA / "database.types.ts", tmp_path / "types" / "database.types.ts")
    return tmp_path


class TestCli:
    """Test cases for the command line entry point"""

    def test_generates_native_project(self, runner, native_project):
        result = runner.invoke(brightbase_gen, [str(native_project)])

        assert result.exit_code == 0, result.output
        assert "Written" in result.output
        assert (native_project / "api" / "Tables.ts").exists()
        assert (native_project / "api" / "Rpc.ts").exists()

    def test_no_rpc_flag(self, runner, native_project):
        result = runner.invoke(brightbase_gen, ["--no-rpc", str(native_project)])

        assert result.exit_code == 0, result.output
        assert not (native_project / "api" / "Rpc.ts").exists()

    def test_reports_deleted_rpc_file(self, runner, native_project):
        runner.invoke(brightbase_gen, [str(native_project)])
        shutil.copy(TEST_DATA / "no_functions.types.ts", native_project / "types" / "database.types.ts")

        result = runner.invoke(brightbase_gen, [str(native_project)])

        assert result.exit_code == 0, result.output
        assert "No RPC functions found, deleted" in result.output
        assert not (native_project / "api" / "Rpc.ts").exists()

    def test_web_target_with_explicit_schema(self, runner, tmp_path):
        result = runner.invoke(
            brightbase_gen,
            ["--target", "web", "--schema", str(TEST_DATA / "no_functions.types.ts"), str(tmp_path)],
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "src" / "api" / "Tables.ts").exists()
        assert (tmp_path / "src" / "types" / "bright.types.ts").exists()

    def test_config_file(self, runner, native_project, tmp_path_factory):
        config_path = tmp_path_factory.mktemp("config") / "brightbase.json"
        config_path.write_text(json.dumps({"omit_on_create": ["id"], "output": {"tables_file": "lib/Tables.ts"}}))

        result = runner.invoke(brightbase_gen, ["--config", str(config_path), str(native_project)])

        assert result.exit_code == 0, result.output
        tables = (native_project / "lib" / "Tables.ts").read_text()
        assert "OmitOnCreate: 'id' //" in tables

    def test_missing_schema_fails(self, runner, tmp_path):
        result = runner.invoke(brightbase_gen, [str(tmp_path)])

        assert result.exit_code == 1
        assert "Cannot read schema file" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_collision_fails(self, runner, tmp_path):
        schema = tmp_path / "schema.ts"
        schema.write_text("users: { Row: {} }\nusers: { Row: {} }\n")

        result = runner.invoke(brightbase_gen, ["--schema", str(schema), str(tmp_path)])

        assert result.exit_code == 1
        assert "'users'" in result.output
        assert not (tmp_path / "api").exists()

    def test_write_failure_exit_code(self, runner, native_project):
        (native_project / "api" / "Tables.ts").mkdir(parents=True)

        result = runner.invoke(brightbase_gen, [str(native_project)])

        assert result.exit_code == 1
        assert "Failed to write" in result.output
        assert (native_project / "api" / "Rpc.ts").exists()


if __name__ == "__main__":
    pytest.main([__file__])
