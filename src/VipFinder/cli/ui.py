"""Click CLI interface definitions.

Defines the command-line structure and routes commands to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from VipFinder.cli.commands import BrowseCommand, SearchCommand, ShowCommand
from VipFinder.cli.runner import CommandRunner
from VipFinder.config import DEFAULT_CONFIG_PATH, AppConfig, load_config, load_config_with_defaults
from VipFinder.core.query import QueryError, build_constraints, parse_filter_option


@click.group(help="VipFinder: search the VIP catalog from the terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file (merged onto config/default.yml when present).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading the config,
    so the dataset location can be overridden from the environment.
    """
    load_dotenv()

    if config_path != DEFAULT_CONFIG_PATH and DEFAULT_CONFIG_PATH.exists():
        ctx.obj = load_config_with_defaults(config_path)
    else:
        ctx.obj = load_config(config_path)


@cli.command("search")
@click.argument("query", required=False, default="")
@click.option("--title", default=None, help="Substring of Title.")
@click.option("--vip-name", default=None, help="Substring of VIP_name.")
@click.option("--family", default=None, help="Substring of VIP_family_name.")
@click.option("--pmid", default=None, help="Substring of PubMed_ID.")
@click.option("--year-min", default=None, help="Earliest Year (inclusive); a non-integer value means no bound.")
@click.option("--year-max", default=None, help="Latest Year (inclusive); a non-integer value means no bound.")
@click.option("--filter", "filters", multiple=True, metavar="FIELD=VALUE", help="Exact value of a filterable field.")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Result page to show.")
@click.option("--details/--no-details", default=True, show_default=True, help="Show details of the first result.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: str,
    title: str | None,
    vip_name: str | None,
    family: str | None,
    pmid: str | None,
    year_min: str | None,
    year_max: str | None,
    filters: tuple[str, ...],
    page: int,
    details: bool,
) -> None:
    """Search by free text and/or structured filters.

    A QUERY equal to a record's PubMed_ID shows that record only.
    """
    cfg: AppConfig = ctx.obj
    try:
        categories = dict(parse_filter_option(item) for item in filters)
        constraints = build_constraints(
            text={"Title": title, "VIP_name": vip_name, "VIP_family_name": family, "PubMed_ID": pmid},
            year_min=year_min,
            year_max=year_max,
            categories=categories,
            filterable_fields=cfg.search.filterable_fields,
        )
    except QueryError as e:
        raise click.BadParameter(str(e), param_hint="--filter") from e

    CommandRunner(cfg).run(
        ctx.command.name,
        lambda coordinator, writer: SearchCommand(
            coordinator=coordinator,
            output_writer=writer,
            free_text=query,
            constraints=constraints,
            page=page,
            show_details=details,
        ),
    )


@cli.command("show")
@click.argument("pmid")
@click.pass_context
def show_cmd(ctx: click.Context, pmid: str) -> None:
    """Show every field of the record with PubMed ID PMID."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda coordinator, writer: ShowCommand(coordinator=coordinator, output_writer=writer, pmid=pmid),
    )


@cli.command("browse")
@click.pass_context
def browse_cmd(ctx: click.Context) -> None:
    """Interactive search loop with paging."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda coordinator, writer: BrowseCommand(coordinator=coordinator, output_writer=writer),
    )
