"""
cmakegen — CLI entrypoint.

Usage:
    python -m cmakegen.main --help
    python -m cmakegen.main generate
    python -m cmakegen.main clean
    python -m cmakegen.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from cmakegen import __version__
from cmakegen.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="cmakegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to cmakegen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """cmakegen — generate a CMakeLists.txt for IDE navigation of an engine build."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("CMAKEGEN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("CMAKEGEN_LOG_FILE"),
        log_file_level=os.environ.get("CMAKEGEN_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the descriptor instead of writing it.")
@click.pass_context
def generate(ctx: click.Context, as_json: bool, to_stdout: bool) -> None:
    """Generate CMakeLists.txt from the manifest."""
    from cmakegen.core.use_cases.generate import run_generate

    result = run_generate(config_path=ctx.obj.get("config_path"), write=not to_stdout)

    if to_stdout and not result.error:
        assert result.output is not None
        click.echo(result.output.descriptor.content, nl=False)
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    output = result.output
    context = result.context
    assert output is not None
    assert context is not None

    if not ctx.obj.get("quiet"):
        click.secho(f"\n🛠  CMake descriptor — {context.platform} ({context.architecture})", fg="cyan", bold=True)
        click.echo(f"   Modules:     {result.module_count}")
        click.echo(
            f"   Files:       {len(output.files.sources)} source, "
            f"{len(output.files.headers)} header, {len(output.files.configs)} config"
            f" ({output.files.excluded} excluded)"
        )
        click.echo(f"   Includes:    {len(output.aggregate.include_directories)}")
        click.echo(f"   Definitions: {len(output.aggregate.definitions)}")
        click.echo(f"   Targets:     {len(output.target_lines)} rule(s)")
        click.echo()

    if result.written:
        click.secho(f"   ✅ Wrote {result.output_path}", fg="green")
    else:
        click.secho(f"   ⊘ Unchanged {result.output_path}", fg="yellow")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding CMakeLists.txt (default: from manifest).",
)
@click.pass_context
def clean(ctx: click.Context, as_json: bool, output_dir: str | None) -> None:
    """Delete the generated CMakeLists.txt, if present."""
    from cmakegen.core.use_cases.clean import run_clean

    result = run_clean(
        config_path=ctx.obj.get("config_path"),
        output_dir=Path(output_dir) if output_dir else None,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.removed:
        click.secho(f"🗑  Removed {result.path}", fg="green")
    else:
        click.echo(f"Nothing to clean at {result.path}")


@cli.group()
def config() -> None:
    """Manifest configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate cmakegen.yml."""
    from cmakegen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.manifest is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Engine:   {result.manifest.engine_root}")
        click.echo(f"   Platform: {result.platform}")
        click.echo(f"   Projects: {len(result.manifest.projects)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register sub-command groups from cmakegen/ui/cli/ ─────────────

from cmakegen.ui.cli.inspect import inspect

cli.add_command(inspect)


if __name__ == "__main__":
    cli()
