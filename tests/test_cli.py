"""
CLI tests.

Unit tests drive partner_samples.cli.main with a fake client. The smoke test at the
bottom runs a real scenario against the API and is skipped unless credentials are set:

    PARTNER_CENTER_ACCESS_TOKEN (or tenant/client/secret), PARTNER_CENTER_CUSTOMER_ID
    and PARTNER_CENTER_SUBSCRIPTION_ID
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from partner_samples import cli
from partner_samples.core.client import APIError
from partner_samples.scenarios import SCENARIOS
from partner_samples.sdk import PartnerClient
from tests.fakes import CUSTOMER_ID, SUBSCRIPTION_ID, make_context

# =============================================================================
# Parser
# =============================================================================


def test_parser_global_overrides():
    args = cli.create_parser().parse_args(["--customer", CUSTOMER_ID, "-s", SUBSCRIPTION_ID, "run", "get-subscription"])

    assert args.customer == CUSTOMER_ID
    assert args.subscription == SUBSCRIPTION_ID
    assert args.command == "run"
    assert args.scenario == "get-subscription"
    assert args.func is cli.cmd_run


def test_parser_rejects_unknown_scenario(capsys):
    with pytest.raises(SystemExit):
        cli.create_parser().parse_args(["run", "delete-everything"])


def test_build_context_applies_flags_over_environment(monkeypatch):
    monkeypatch.setenv("PARTNER_CENTER_CUSTOMER_ID", "from-env")
    monkeypatch.setenv("PARTNER_CENTER_SUBSCRIPTION_ID", "sub-from-env")
    monkeypatch.setenv("PARTNER_CENTER_ACCESS_TOKEN", "token")
    args = cli.create_parser().parse_args(["--customer", "from-flag", "list"])

    context = cli.build_context(args)

    assert context.settings.customer_id == "from-flag"
    assert context.settings.subscription_id == "sub-from-env"
    assert isinstance(context.client, PartnerClient)


# =============================================================================
# Commands
# =============================================================================


def test_list_prints_every_scenario(monkeypatch, capsys):
    context, _ = make_context()
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    cli.main(["list"])

    out = capsys.readouterr().out
    for key, scenario in SCENARIOS.items():
        assert key in out
        assert scenario.title in out


def test_run_scenario(monkeypatch):
    context, _ = make_context(CUSTOMER_ID, SUBSCRIPTION_ID)
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    cli.main(["run", "update-subscription"])

    assert context.client.subscriptions.patched[0].quantity == 6


def test_api_error_exits_non_zero(monkeypatch):
    context, _ = make_context(CUSTOMER_ID, SUBSCRIPTION_ID)

    def fail(customer_id, subscription_id):
        raise APIError("Subscription not found", status=404, details={"code": 800002})

    monkeypatch.setattr(context.client.subscriptions, "get", fail)
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", "get-subscription"])

    assert exc_info.value.code == 1
    err = context.console.err.getvalue()
    assert "Error: Subscription not found" in err
    assert '"status": 404' in err


def test_menu_runs_selected_scenario(monkeypatch):
    keys = list(SCENARIOS)
    choice = str(keys.index("update-subscription") + 1)
    context, _ = make_context(choice, CUSTOMER_ID, SUBSCRIPTION_ID)
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    cli.main([])

    assert context.client.subscriptions.patched[0].quantity == 6


def test_menu_rejects_out_of_range_choice(monkeypatch):
    context, _ = make_context("99")
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 1
    assert "Invalid scenario: 99" in context.console.err.getvalue()


@pytest.mark.parametrize("choice", ["\u00b2", "0", "-1", "one"])
def test_menu_rejects_non_numeric_choice(monkeypatch, choice):
    context, _ = make_context(choice)
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 1
    assert f"Invalid scenario: {choice}" in context.console.err.getvalue()


def test_end_of_input_exits_quietly(monkeypatch):
    context, _ = make_context()
    monkeypatch.setattr(cli, "build_context", lambda args: context)

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", "get-subscription"])

    assert exc_info.value.code == 130


# =============================================================================
# Live smoke test
# =============================================================================


def has_live_credentials() -> bool:
    has_token = bool(os.environ.get("PARTNER_CENTER_ACCESS_TOKEN")) or all(
        os.environ.get(name)
        for name in ("PARTNER_CENTER_TENANT_ID", "PARTNER_CENTER_CLIENT_ID", "PARTNER_CENTER_CLIENT_SECRET")
    )
    has_ids = bool(os.environ.get("PARTNER_CENTER_CUSTOMER_ID") and os.environ.get("PARTNER_CENTER_SUBSCRIPTION_ID"))
    return has_token and has_ids


@pytest.mark.skipif(not has_live_credentials(), reason="Partner Center credentials and IDs required")
def test_live_get_subscription():
    result = subprocess.run(
        [sys.executable, "-m", "partner_samples.cli", "run", "get-subscription"],
        capture_output=True,
        text=True,
        env=os.environ.copy(),
        timeout=60,
        cwd=Path(__file__).resolve().parent.parent,
    )

    assert result.returncode == 0, result.stderr
    assert "Customer subscription:" in result.stdout
