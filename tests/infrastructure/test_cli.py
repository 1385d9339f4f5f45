"""End-to-end tests for the click CLI and the interactive shell."""

import logging

import click
from click.testing import CliRunner

from qualipure.infrastructure.bootstrap import build_storefront
from qualipure.infrastructure.cli.main import cli
from qualipure.infrastructure.cli.shell import run_shell
from qualipure.infrastructure.cli.state import ShellState
from qualipure.infrastructure.config import Settings
from tests.fakes import FakeClock

# FakeClock starts at 2025-01-01 08:00 UTC, so the first order id is
# 1735718400000 and its short id is 400000.
FIRST_SHORT_ID = "400000"


@click.command()
def fixed_clock_shell() -> None:
    run_shell(ShellState(build_storefront(Settings(), clock=FakeClock())))


def _run(*lines: str):
    return CliRunner().invoke(fixed_clock_shell, input="\n".join(lines) + "\n")


class TestCatalogCommand:

    def test_lists_products(self):
        result = CliRunner().invoke(cli, ["catalog"])
        assert result.exit_code == 0
        assert "Water with Slim Gallon" in result.output
        assert "₱200.00" in result.output
        assert "p4" in result.output

    def test_log_level_option_overrides_settings(self):
        result = CliRunner().invoke(cli, ["--log-level", "error", "catalog"])
        assert result.exit_code == 0
        assert logging.getLogger("qualipure").level == logging.ERROR


class TestShell:

    def test_customer_checkout(self):
        result = CliRunner().invoke(
            cli,
            ["shell"],
            input="Zyrus Jake\npassword\nadd p1\nadd p1\ncheckout --yes\norders\nquit\n",
        )
        assert result.exit_code == 0
        assert "Welcome, Zyrus Jake!" in result.output
        assert "Cart: 1 item(s), ₱400.00" in result.output
        assert "Order for ₱400.00 placed successfully!" in result.output
        assert "Goodbye." in result.output

    def test_invalid_login(self):
        result = _run("admin", "wrong")
        assert result.exit_code == 0
        assert "Invalid username or password" in result.output
        assert "Goodbye." in result.output

    def test_empty_cart_checkout_rejected(self):
        result = _run("Zyrus Jake", "password", "checkout --yes", "quit")
        assert "Your cart is empty. Cannot place order." in result.output

    def test_zeroed_line_kept_after_checkout(self):
        result = _run(
            "Zyrus Jake", "password",
            "add p1", "add p2", "dec p2",
            "checkout --yes",
            "cart",
            "quit",
        )
        assert "Order for ₱200.00 placed successfully!" in result.output
        assert "Refill only/Slim Gallon" in result.output.split("placed successfully!")[-1]

    def test_rating_validation(self):
        result = _run("Zyrus Jake", "password", "rate 6", "rate 5 Great service", "quit")
        assert "Rating must be between 1 and 5" in result.output
        assert "Thank you for your rating!" in result.output

    def test_admin_fulfils_and_archives(self):
        result = _run(
            "Zyrus Jake", "password",
            "add p1", "add p1",
            "checkout --yes",
            "logout",
            "admin", "adminpass",
            f"archive {FIRST_SHORT_ID}",
            f"advance {FIRST_SHORT_ID}",
            f"advance {FIRST_SHORT_ID} --to delivered",
            f"archive {FIRST_SHORT_ID}",
            "orders",
            "archived",
            "ratings",
            "quit",
        )
        assert result.exit_code == 0
        assert "Cannot archive order 400000" in result.output
        assert "Order 400000 is now PREPARING." in result.output
        assert "Order 400000 is now DELIVERED." in result.output
        assert "Order 400000 archived." in result.output
        assert "No active orders for administration." in result.output
        assert "No ratings submitted yet." in result.output

    def test_customer_soft_delete_and_notifications(self):
        result = _run(
            "Zyrus Jake", "password",
            "add p2",
            "checkout --yes",
            "logout",
            "admin", "adminpass",
            f"advance {FIRST_SHORT_ID} --to on_delivery",
            "logout",
            "Zyrus Jake", "password",
            "notifications",
            f"delete {FIRST_SHORT_ID}",
            "orders",
            "quit",
        )
        assert "Order 400000 is now ON DELIVERY!" in result.output
        assert "Order 400000 deleted from your history." in result.output
        assert "You have no active orders." in result.output

    def test_customer_cannot_cancel_after_preparing(self):
        result = _run(
            "Zyrus Jake", "password",
            "add p1",
            "checkout --yes",
            "logout",
            "admin", "adminpass",
            f"advance {FIRST_SHORT_ID}",
            "logout",
            "Zyrus Jake", "password",
            f"cancel {FIRST_SHORT_ID}",
            "quit",
        )
        assert "Cannot move order 400000 from PREPARING to CANCELLED" in result.output

    def test_unknown_command_reported(self):
        result = _run("Zyrus Jake", "password", "fly", "quit")
        assert "No such command" in result.output
        assert "Goodbye." in result.output
