"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from oms.application.add_product import AddProductHandler
from oms.application.authorization import require_role
from oms.application.delete_product import DeleteProductHandler
from oms.application.dto import ProductDTO
from oms.application.search_products import DEFAULT_PAGE_SIZE, SearchProductsHandler
from oms.application.show_product import ShowProductHandler
from oms.application.update_product import UpdateProductHandler
from oms.domain.exceptions import DomainException
from oms.domain.model.user import Role
from oms.infrastructure.cli.context import CliContext, pass_cli


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Price:     ${dto.price}")
    click.echo(f"Stock:     {dto.stock}")
    click.echo(f"Category:  {dto.category or '-'}")
    if dto.description:
        click.echo(f"\n{dto.description}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--category", default="", help="Catalog category.")
@pass_cli
def product_add(
    ctx: CliContext,
    name: str,
    price: str,
    stock: int,
    description: str,
    category: str,
) -> None:
    """Add a new product to the catalog (ADMIN)."""
    try:
        require_role(ctx.principal(), Role.ADMIN)
        dto = AddProductHandler(ctx.uow()).handle(
            name=name,
            price=price,
            stock=stock,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    click.echo(f"Product #{dto.id} '{dto.name}' added at ${dto.price} ({dto.stock} in stock)")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@pass_cli
def product_update(
    ctx: CliContext,
    product_id: int,
    name: str | None,
    price: str | None,
    stock: int | None,
    description: str | None,
    category: str | None,
) -> None:
    """Update a product (ADMIN). Omitted fields keep their value."""
    try:
        require_role(ctx.principal(), Role.ADMIN)
        dto = UpdateProductHandler(ctx.uow()).handle(
            product_id=product_id,
            name=name,
            price=price,
            stock=stock,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    click.echo(f"Product #{dto.id} updated.")
    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def product_delete(ctx: CliContext, product_id: int) -> None:
    """Remove a product from the catalog (ADMIN)."""
    try:
        require_role(ctx.principal(), Role.ADMIN)
        DeleteProductHandler(ctx.uow()).handle(product_id)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json({"id": product_id, "deleted": True})
        return
    click.echo(f"Product #{product_id} deleted.")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def product_show(ctx: CliContext, product_id: int) -> None:
    """Show one product."""
    try:
        dto = ShowProductHandler(ctx.uow()).handle(product_id)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    _display_product(dto)


@click.command("search")
@click.option("--search", default=None, help="Case-insensitive name filter.")
@click.option("--page", default=0, type=int, show_default=True, help="Page number (0-based).")
@click.option("--size", default=DEFAULT_PAGE_SIZE, type=int, show_default=True, help="Products per page.")
@pass_cli
def product_search(ctx: CliContext, search: str | None, page: int, size: int) -> None:
    """Search the catalog, one page at a time."""
    try:
        result = SearchProductsHandler(ctx.uow()).handle(search=search, page=page, size=size)
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(result.to_dict())
        return

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 61)
    for p in result.items:
        price = f"${p.price}"
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<14} {price:>10} {p.stock:>7}")
    click.echo(
        f"\nPage {result.page + 1} of {max(result.total_pages, 1)} "
        f"({result.total_items} products)"
    )
