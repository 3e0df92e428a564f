from pathlib import Path

import click

from oms.infrastructure.cli.context import CliContext
from oms.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_show,
)
from oms.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_search,
    product_show,
    product_update,
)
from oms.infrastructure.cli.user_commands import user_register, user_whoami
from oms.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="OMS_DATA_DIR",
    default=None,
    help="Directory holding the store (default: <project>/data).",
)
@click.option("--email", envvar="OMS_EMAIL", default=None, help="Login email.")
@click.option("--password", envvar="OMS_PASSWORD", default=None, help="Login password.")
@click.option("--json", "as_json", is_flag=True, help="Print wire-format JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log INFO events to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path | None,
    email: str | None,
    password: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """OMS — Order Management System"""
    configure_logging(verbose)
    ctx.obj = CliContext(
        data_dir=data_dir,
        email=email,
        password=password,
        as_json=as_json,
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
user.add_command(user_register)
user.add_command(user_whoami)
