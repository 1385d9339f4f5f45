import click

from qualipure.infrastructure.bootstrap import Storefront, build_storefront
from qualipure.infrastructure.cli.display import display_catalog
from qualipure.infrastructure.cli.shell import shell
from qualipure.infrastructure.config import Settings
from qualipure.infrastructure.logger import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override QUALIPURE_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """QualiPure — water refilling storefront"""
    settings = Settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level.upper()})
    configure_logging(settings.log_level)
    ctx.obj = build_storefront(settings)


@click.command("catalog")
@click.pass_obj
def catalog(storefront: Storefront) -> None:
    """List all products in the catalog."""
    display_catalog(storefront.products.list_all())


# Register subcommands
cli.add_command(catalog)
cli.add_command(shell)
