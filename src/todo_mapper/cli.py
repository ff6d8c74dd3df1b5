"""todo-mapper CLI - console report of TODO comments and their scopes."""

import json

import click

from todo_mapper import __version__
from todo_mapper.core import FileScan
from todo_mapper.logging import configure_logging
from todo_mapper.services import ScanningService


@click.group()
@click.version_option(version=__version__, prog_name="todo-mapper")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Find TODO comments and report the member, type and namespace around each."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


@cli.command("scan")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array instead of the report")
@click.option("--fail-on-match", is_flag=True, help="Exit with status 1 when any TODO is found")
def scan_command(paths: tuple[str, ...], as_json: bool, fail_on_match: bool) -> None:
    """Scan source files, directories, .sln solutions or .csproj projects."""
    results = ScanningService().scan_paths(paths)

    if as_json:
        click.echo(json.dumps(_to_json(results), indent=2))
    else:
        for result in results:
            _print_report(result)

    for result in results:
        if result.tree is None:
            click.echo(f"{result.relative_path}: {'; '.join(result.errors)}", err=True)

    total = sum(result.comment_count for result in results)
    if fail_on_match and total > 0:
        raise SystemExit(1)


def _print_report(result: FileScan) -> None:
    for record in result.comments:
        context = result.describe(record)
        click.echo(context.content)
        click.echo()
        if context.namespace_name is None:
            click.echo("Not in any namespace")
        else:
            click.echo(f"Namespace: {context.namespace_name}")
        if context.type_name is not None:
            click.echo(f"Type: {context.type_name}")
        if context.member_name is not None:
            click.echo(f"Method/Property: {context.member_name}")
        # Editors count lines from 1
        click.echo(f"{result.relative_path}:{record.line + 1}")
        click.echo()


def _to_json(results: list[FileScan]) -> list[dict]:
    items = []
    for result in results:
        for record in result.comments:
            context = result.describe(record)
            items.append({
                "path": result.relative_path,
                "line": record.line,
                "content": context.content,
                "namespace": context.namespace_name,
                "type": context.type_name,
                "member": context.member_name,
            })
    return items


if __name__ == "__main__":
    cli()
