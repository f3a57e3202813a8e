"""CLI interface for Doctree.

Command-line tool for inspecting and serving documentation trees.
"""

import json
import logging
from pathlib import Path

import click

from doctree.config import Config
from doctree.core.loader import TreeLoader
from doctree.core.navigation import build_navigation
from doctree.core.tree import Root

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover doctree.toml)",
)
source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show loader diagnostics)",
)


@click.group()
def cli() -> None:
    """Doctree - ordered navigation for documentation trees."""


@cli.command()
@config_option
@source_dir_option
@verbose_option
def dump(config_path: Path | None, source_dir: Path | None, verbose: bool) -> None:
    """Print the sorted content tree as JSON."""
    root = _load_tree(config_path, source_dir, verbose)
    click.echo(json.dumps(root.dump(), indent=2))


@cli.command()
@config_option
@source_dir_option
@verbose_option
def nav(config_path: Path | None, source_dir: Path | None, verbose: bool) -> None:
    """Print the navigation tree as JSON."""
    root = _load_tree(config_path, source_dir, verbose)
    items = [item.to_dict() for item in build_navigation(root)]
    click.echo(json.dumps({"items": items}, indent=2))


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the navigation API server."""
    from doctree.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")

    run_server(config)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None) -> Config:
    """Load configuration, reporting problems as CLI errors."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _load_tree(config_path: Path | None, source_dir: Path | None, verbose: bool) -> Root:
    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(source_dir=source_dir)
    return TreeLoader(config.docs.source_dir, config.tree).load()


if __name__ == "__main__":
    cli()
