"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from oms.application.authorization import require_role
from oms.application.cancel_order import CancelOrderHandler
from oms.application.create_order import CreateOrderHandler
from oms.application.dto import OrderDTO, OrderItemSpec
from oms.application.list_orders import ListOrdersHandler
from oms.application.show_order import ShowOrderHandler
from oms.domain.exceptions import DomainException
from oms.domain.model.order import OrderStatus
from oms.domain.model.user import Role
from oms.infrastructure.cli.context import CliContext, pass_cli


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(id_str)
        except ValueError:
            raise click.BadParameter(f"Invalid product ID '{id_str.strip()}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product {product_id}."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    if dto.client is not None:
        click.echo(f"Client:   {dto.client.name} <{dto.client.email}>")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*48}")
    for line in dto.details:
        price = f"${line.unit_price}"
        subtotal = f"${line.subtotal}"
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {price:>10} {subtotal:>10}"
        )
    click.echo(f"  {'-'*48}")
    total = f"${dto.total}"
    click.echo(f"  {'Order Total':<27} {total:>20}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@pass_cli
def order_create(ctx: CliContext, items: str) -> None:
    """Place a new order (CLIENT)."""
    specs = _parse_items(items)

    try:
        principal = ctx.principal()
        require_role(principal, Role.CLIENT)
        dto = CreateOrderHandler(ctx.uow()).handle(principal, specs)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    click.echo(f"Order #{dto.id} created.")
    _display_order(dto)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    default=None,
    help="Only orders in this status.",
)
@click.option("--all", "all_orders", is_flag=True, help="Every order in the system (ADMIN).")
@click.option("--client", "client_email", default=None, help="Orders of one client (ADMIN).")
@pass_cli
def order_list(
    ctx: CliContext,
    status: str | None,
    all_orders: bool,
    client_email: str | None,
) -> None:
    """List your orders, or (ADMIN) all orders or one client's orders."""
    if all_orders and client_email:
        raise click.UsageError("--all and --client are mutually exclusive")

    status_filter = OrderStatus(status.upper()) if status else None

    try:
        principal = ctx.principal()
        handler = ListOrdersHandler(ctx.uow())
        if all_orders:
            require_role(principal, Role.ADMIN)
            dtos = handler.all(status_filter)
        elif client_email:
            require_role(principal, Role.ADMIN)
            dtos = handler.for_client(client_email, status_filter)
        else:
            require_role(principal, Role.CLIENT)
            dtos = handler.for_principal(principal, status_filter)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json([dto.to_dict() for dto in dtos])
        return

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Created':<26} {'Client':<24} {'Status':<10} {'Total':>10}")
    click.echo("-" * 80)
    for dto in dtos:
        client = dto.client.email if dto.client else "?"
        total = f"${dto.total}"
        click.echo(
            f"{dto.id:<6} {dto.created_at:<26} {client:<24} {dto.status:<10} {total:>10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@pass_cli
def order_show(ctx: CliContext, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        principal = ctx.principal()
        dto = ShowOrderHandler(ctx.uow()).handle(principal, order_id)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    _display_order(dto)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@pass_cli
def order_cancel(ctx: CliContext, order_id: int) -> None:
    """Cancel one of your pending orders (CLIENT). Stock is not restored."""
    try:
        principal = ctx.principal()
        require_role(principal, Role.CLIENT)
        dto = CancelOrderHandler(ctx.uow()).handle(order_id, principal.email)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    click.echo(f"Order #{order_id} cancelled.")
