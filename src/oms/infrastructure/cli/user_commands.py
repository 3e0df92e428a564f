"""CLI commands for users and authentication."""

from __future__ import annotations

import click

from oms.application.register_user import RegisterUserHandler
from oms.domain.exceptions import DomainException
from oms.domain.model.user import Role
from oms.infrastructure import bootstrap
from oms.infrastructure.cli.context import CliContext, pass_cli


@click.command("register")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", "new_email", required=True, help="Login email.")
@click.option("--password", "new_password", required=True, help="Login password.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    default=Role.CLIENT.value,
    show_default=True,
)
@pass_cli
def user_register(
    ctx: CliContext,
    name: str,
    new_email: str,
    new_password: str,
    role: str,
) -> None:
    """Register a new user."""
    handler = RegisterUserHandler(ctx.uow(), bootstrap.password_hasher())

    try:
        dto = handler.handle(
            name=name,
            email=new_email,
            password=new_password,
            role=Role(role.upper()),
        )
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    click.echo(f"User #{dto.id} '{dto.email}' registered as {dto.role}")


@click.command("whoami")
@pass_cli
def user_whoami(ctx: CliContext) -> None:
    """Show the authenticated principal."""
    try:
        principal = ctx.principal()
    except DomainException as exc:
        raise ctx.fail(exc)

    if ctx.as_json:
        ctx.emit_json({"email": principal.email, "role": principal.role.value})
        return
    click.echo(f"{principal.email} ({principal.role.value})")
