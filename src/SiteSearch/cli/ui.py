"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from SiteSearch.cli.runner import CommandRunner
from SiteSearch.config import load_config


@click.group(help="SiteSearch: query a pre-built site index and filter results by category.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config,
    so ``index.source_env`` can be set there.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    cfg = load_config(config_path)
    ctx.obj = cfg


@cli.command("search")
@click.argument("query")
@click.option(
    "-c",
    "--category",
    "categories",
    multiple=True,
    help="Category key to show; repeat to show several. Default: all.",
)
@click.pass_context
def search_cmd(ctx: click.Context, query: str, categories: tuple[str, ...]) -> None:
    """Search the index for QUERY and print the results.

    Args:
        ctx: Click context.
        query: Raw query text.
        categories: Category keys to activate.

    Raises:
        click.Abort: When the search fails.
    """
    cfg = ctx.obj
    known = cfg.taxonomy.keys
    for key in categories:
        if key not in known:
            raise click.BadParameter(f"unknown category {key!r}; expected one of {list(known)}", param_hint="--category")
    runner = CommandRunner(cfg)
    runner.run_search(action=ctx.command.name, query=query, categories=categories)


@cli.command("categories")
@click.pass_context
def categories_cmd(ctx: click.Context) -> None:
    """List configured category keys and labels in display order."""
    for category in ctx.obj.taxonomy.categories:
        click.echo(f"{category.key}\t{category.label}\t{', '.join(category.fragments)}")
