"""
CLI commands for inspecting intermediate pipeline results.

Thin wrappers over ``cmakegen.core.use_cases.generate`` run without
writing anything.
"""

from __future__ import annotations

import json
import sys

import click

from cmakegen.core.use_cases.generate import GenerateResult


def _run(ctx: click.Context) -> GenerateResult:
    """Run the pipeline without writing; exit on error."""
    from cmakegen.core.use_cases.generate import run_generate

    result = run_generate(config_path=ctx.obj.get("config_path"), write=False)
    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)
    return result


@click.group()
def inspect() -> None:
    """Inspect pipeline output — files, includes, definitions, targets."""


@inspect.command("files")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def files(ctx: click.Context, as_json: bool) -> None:
    """List classified source, header and config files."""
    result = _run(ctx)
    assert result.output is not None
    classified = result.output.files

    if as_json:
        click.echo(json.dumps(classified.to_dict(), indent=2))
        return

    for label, paths in (
        ("Sources", classified.sources),
        ("Headers", classified.headers),
        ("Configs", classified.configs),
    ):
        click.secho(f"📄 {label} ({len(paths)}):", fg="cyan", bold=True)
        for path in paths:
            click.echo(f"   {path}")
        click.echo()

    if classified.excluded:
        click.secho(f"   {classified.excluded} file(s) excluded on this platform", fg="yellow")


@inspect.command("includes")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def includes(ctx: click.Context, as_json: bool) -> None:
    """List aggregated include directories."""
    result = _run(ctx)
    assert result.output is not None
    dirs = result.output.aggregate.include_directories.to_list()

    if as_json:
        click.echo(json.dumps(dirs, indent=2))
        return

    click.secho(f"📁 Include directories ({len(dirs)}):", fg="cyan", bold=True)
    for d in dirs:
        click.echo(f"   {d}")


@inspect.command("definitions")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def definitions(ctx: click.Context, as_json: bool) -> None:
    """List aggregated preprocessor definitions."""
    result = _run(ctx)
    assert result.output is not None
    defs = result.output.aggregate.definitions.to_list()

    if as_json:
        click.echo(json.dumps(defs, indent=2))
        return

    click.secho(f"🔣 Definitions ({len(defs)}):", fg="cyan", bold=True)
    for d in defs:
        click.echo(f"   -D{d}")


@inspect.command("targets")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def targets(ctx: click.Context, as_json: bool) -> None:
    """List build target rules."""
    result = _run(ctx)
    assert result.output is not None
    lines = [line.strip() for line in result.output.target_lines]

    if as_json:
        click.echo(json.dumps(lines, indent=2))
        return

    click.secho(f"🎯 Target rules ({len(lines)}):", fg="cyan", bold=True)
    for line in lines:
        click.echo(f"   {line}")
