"""Interactive storefront shell.

Prompts for credentials, then reads one command per line and dispatches
it to the customer or admin command group for the logged-in role. All
state lives in this process and is gone when the shell exits.
"""

from __future__ import annotations

import shlex

import click

from qualipure.domain.exceptions import DomainException
from qualipure.infrastructure.bootstrap import Storefront
from qualipure.infrastructure.cli.admin_commands import admin
from qualipure.infrastructure.cli.customer_commands import customer
from qualipure.infrastructure.cli.state import ShellState


def _login(state: ShellState) -> None:
    username = click.prompt("Username")
    if username.strip() in ("quit", "exit"):
        state.quit()
        return
    password = click.prompt("Password", hide_input=True)

    try:
        session = state.storefront.authenticator().handle(username, password)
    except DomainException as exc:
        click.echo(f"Error: {exc}", err=True)
        return

    state.login(session)
    role = "admin" if session.is_admin else "customer"
    click.echo(f"Welcome, {session.username}! Type --help for {role} commands.")


def run_shell(state: ShellState) -> None:
    while state.running:
        if state.session is None:
            try:
                _login(state)
            except click.Abort:
                break
            continue

        try:
            line = click.prompt(
                f"{state.session.username}>", default="", show_default=False, prompt_suffix=" "
            )
        except click.Abort:
            break

        try:
            args = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        if not args:
            continue

        group = admin if state.session.is_admin else customer
        try:
            group.main(
                args,
                prog_name=group.name,
                standalone_mode=False,
                obj=state,
            )
        except click.ClickException as exc:
            exc.show()
        except click.Abort:
            click.echo("Aborted.")

    click.echo("Goodbye.")


@click.command("shell")
@click.pass_obj
def shell(storefront: Storefront) -> None:
    """Start an interactive storefront session."""
    click.echo("QualiPure Water Refilling. Log in to continue (type 'quit' to leave).")
    run_shell(ShellState(storefront))
