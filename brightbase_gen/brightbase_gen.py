import json
import logging
import sys
from pathlib import Path

import click

from .pipeline import BrightBaseGenError, GeneratorConfig, SyncStatus, Target, run

_STATUS_COLORS = {
    SyncStatus.WRITTEN: "green",
    SyncStatus.DELETED: "green",
    SyncStatus.SKIPPED: None,
    SyncStatus.FAILED: "red",
}


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--target", "-t", default=Target.NATIVE.value, type=click.Choice([t.value for t in Target]))
@click.option("--schema", "-s", default=None, type=click.Path(dir_okay=False, resolve_path=True), help="Schema file (defaults to the target's database.types.ts)")
@click.option("--no-rpc", is_flag=True, default=False, help="Do not generate (or delete) the RPC bindings file")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("project_dir", default=".", type=click.Path(file_okay=False, resolve_path=True))
def brightbase_gen(config, target, schema, no_rpc, verbose, project_dir):
    """Generate BrightBase table and RPC bindings for PROJECT_DIR."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f), target)
    else:
        config = GeneratorConfig.for_target(target)

    # CLI flag overrides the config file
    if no_rpc:
        config.generate_rpc = False

    try:
        report = run(Path(project_dir), config, Path(schema) if schema else None)
    except BrightBaseGenError as e:
        raise click.ClickException(str(e)) from e

    rpc_path = Path(project_dir) / config.output.rpc_file
    for result in report.results:
        if result.status == SyncStatus.FAILED:
            message = str(result.error)
        elif result.path == rpc_path and result.status != SyncStatus.WRITTEN:
            message = f"No RPC functions found, {result.status.value} {result.path}"
        else:
            message = f"{result.status.value.capitalize()} {result.path}"
        click.secho(message, fg=_STATUS_COLORS[result.status], err=result.status == SyncStatus.FAILED)

    if not report.ok:
        sys.exit(1)
