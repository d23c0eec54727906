"""Command-line interface for vfspath."""
import sys
import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from rich.tree import Tree

from . import __version__
from .core.models import Config, FileNode
from .utils import PathUtils, FileTreeBuilder

logger = logging.getLogger(__name__)

CONSOLE_THEME = Theme({
    'info': 'cyan',
    'error': 'bold red',
    'path': 'white',
    'dim': 'bright_black',
    'highlight': 'bright_cyan',
})


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def make_console() -> Console:
    """Console for table and tree views."""
    return Console(theme=CONSOLE_THEME, highlight=False, emoji=False, soft_wrap=True)


def _build_path_utils(ctx: click.Context, param: click.Parameter,
                      value: Optional[str]) -> PathUtils:
    try:
        config = Config() if value is None else Config(separator=value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)
    return PathUtils(config)


@click.group()
@click.option('--separator', '-s', 'path_utils', callback=_build_path_utils,
              help='Path separator character (default: $VFSPATH_SEPARATOR or "/")')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__, prog_name='vfspath')
@click.pass_context
def cli(ctx: click.Context, path_utils: PathUtils, debug: bool) -> None:
    """
    Lexically manipulate virtual file system paths.

    Nothing is read from disk: every command works on the text of the
    paths given.

    Examples:

        vfspath clean a//b/../c/

        vfspath join /srv "" static ../index.html

        vfspath -s ':' split a:b:c
    """
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj['paths'] = path_utils
    ctx.obj['console'] = make_console()


@cli.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def clean(ctx: click.Context, paths) -> None:
    """Print the cleaned form of each PATH."""
    for path in paths:
        click.echo(ctx.obj['paths'].clean(path))


@cli.command()
@click.argument('path')
@click.pass_context
def split(ctx: click.Context, path: str) -> None:
    """Print the directory and file parts of PATH, tab separated."""
    result = ctx.obj['paths'].split(path)
    click.echo(f"{result.dir}\t{result.file}")


@cli.command()
@click.argument('elems', nargs=-1)
@click.pass_context
def join(ctx: click.Context, elems) -> None:
    """Join ELEMS with the separator and clean the result."""
    click.echo(ctx.obj['paths'].join(*elems))


@cli.command()
@click.argument('path')
@click.pass_context
def ext(ctx: click.Context, path: str) -> None:
    """Print the extension of PATH."""
    click.echo(ctx.obj['paths'].ext(path))


@cli.command()
@click.argument('path')
@click.pass_context
def base(ctx: click.Context, path: str) -> None:
    """Print the last segment of PATH."""
    click.echo(ctx.obj['paths'].base(path))


@cli.command('dir')
@click.argument('path')
@click.pass_context
def dir_command(ctx: click.Context, path: str) -> None:
    """Print the cleaned directory part of PATH."""
    click.echo(ctx.obj['paths'].dir(path))


@cli.command('is-abs')
@click.argument('path')
@click.pass_context
def is_abs(ctx: click.Context, path: str) -> None:
    """Print whether PATH is rooted; exit status 1 when it is not."""
    rooted = ctx.obj['paths'].is_abs(path)
    click.echo("true" if rooted else "false")
    ctx.exit(0 if rooted else 1)


@cli.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def inspect(ctx: click.Context, paths) -> None:
    """Show every operation applied to each PATH as a table."""
    path_utils: PathUtils = ctx.obj['paths']
    table = Table(title="PATH INSPECTION", header_style="highlight")
    for column in ("Path", "Clean", "Dir", "Base", "Ext", "Abs"):
        table.add_column(column, overflow="fold")

    for path in paths:
        table.add_row(
            Text(repr(path)),
            Text(path_utils.clean(path)),
            Text(path_utils.dir(path)),
            Text(path_utils.base(path)),
            Text(path_utils.ext(path)),
            "yes" if path_utils.is_abs(path) else "no",
        )

    ctx.obj['console'].print(table)


def _render_tree(node: FileNode, branch: Tree) -> None:
    for child in sorted(node.children, key=lambda x: (x.is_file(), x.name)):
        label = Text(child.name, style="path" if child.is_file() else "info")
        sub_branch = branch.add(label)
        if child.is_directory():
            _render_tree(child, sub_branch)


@cli.command()
@click.argument('paths', nargs=-1, required=True)
@click.option('--root', default='.', show_default=True, help='Label for the root node')
@click.pass_context
def tree(ctx: click.Context, paths, root: str) -> None:
    """Render PATHS as a directory tree after cleaning them."""
    root_node = FileTreeBuilder.from_paths(root, paths, ctx.obj['paths'])
    rendered = Tree(Text(root_node.name, style="highlight"))
    _render_tree(root_node, rendered)
    ctx.obj['console'].print(rendered)


def main() -> None:
    """Console script entry point."""
    try:
        cli(prog_name='vfspath')
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        make_console().print(f"\n[error]> CRITICAL ERROR:[/error] {escape(str(e))}")
        sys.exit(1)


if __name__ == '__main__':
    main()
