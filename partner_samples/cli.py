"""
Partner Samples CLI - Interactive sample scenarios.

This layer provides the user-facing commands, using the SDK layer
for all operations. It handles:
- Argument parsing and .env loading
- Listing scenarios and the interactive menu
- Building the scenario context from settings and flags
- Reporting errors with a non-zero exit code
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from partner_samples.config import Settings
from partner_samples.console import ConsoleHelper
from partner_samples.core.client import CLIError
from partner_samples.scenarios import SCENARIOS, ScenarioContext
from partner_samples.sdk import PartnerClient

logger = logging.getLogger(__name__)

# =============================================================================
# Output Helpers
# =============================================================================


def table_output(
    headers: list[str],
    rows: list[list[str]],
    widths: list[int],
) -> None:
    """Print a formatted table for human output."""
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(header_line)
    print("-" * len(header_line))

    for row in rows:
        print("  ".join(str(v)[:w].ljust(w) for v, w in zip(row, widths)))


def error_output(console: ConsoleHelper, error: CLIError) -> None:
    """Report an error and exit."""
    console.error(error.message)
    if error.details:
        print(json.dumps(error.to_dict(), indent=2, default=str), file=console.err)
    sys.exit(1)


def build_context(args: argparse.Namespace, console: ConsoleHelper | None = None) -> ScenarioContext:
    """Create the scenario context from the environment and command-line overrides."""
    settings = Settings.from_env().with_overrides(
        base_url=args.base_url,
        customer_id=args.customer,
        subscription_id=args.subscription,
    )
    client = PartnerClient(
        access_token=settings.access_token,
        base_url=settings.base_url,
        tenant_id=settings.tenant_id,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
    )
    return ScenarioContext(client=client, console=console or ConsoleHelper(), settings=settings)


# =============================================================================
# CLI Commands
# =============================================================================


def cmd_list(_context: ScenarioContext, _args: argparse.Namespace) -> None:
    """List the available scenarios."""
    table_output(
        ["Scenario", "Description"],
        [[key, cls.title] for key, cls in SCENARIOS.items()],
        [26, 50],
    )


def cmd_run(context: ScenarioContext, args: argparse.Namespace) -> None:
    """Run a single scenario."""
    logger.debug("Selected scenario %s", args.scenario)
    scenario = SCENARIOS[args.scenario](context)
    try:
        scenario.run()
    except CLIError as e:
        error_output(context.console, e)


def cmd_menu(context: ScenarioContext, _args: argparse.Namespace) -> None:
    """Show a numbered menu and run the chosen scenario."""
    console = context.console
    keys = list(SCENARIOS)
    for i, key in enumerate(keys, 1):
        console.success(f"{i}: {SCENARIOS[key].title}")

    choice = console.read_non_empty_string("Select a scenario", "A scenario number is required")
    if not choice.isdecimal() or not 1 <= int(choice) <= len(keys):
        console.error(f"Invalid scenario: {choice}")
        sys.exit(1)

    cmd_run(context, argparse.Namespace(scenario=keys[int(choice) - 1]))


# =============================================================================
# Main CLI
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="partner-samples",
        description="Partner Center sample scenarios - subscription workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Authentication (environment or .env):
  PARTNER_CENTER_ACCESS_TOKEN, or
  PARTNER_CENTER_TENANT_ID + PARTNER_CENTER_CLIENT_ID + PARTNER_CENTER_CLIENT_SECRET

Examples:
  partner-samples list
  partner-samples --customer <customer_id> run update-subscription
  partner-samples                # interactive menu
""",
    )
    parser.add_argument("--customer", "-c", help="Customer ID (overrides PARTNER_CENTER_CUSTOMER_ID)")
    parser.add_argument("--subscription", "-s", help="Subscription ID (overrides PARTNER_CENTER_SUBSCRIPTION_ID)")
    parser.add_argument("--base-url", help="API base URL (overrides PARTNER_CENTER_BASE_URL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    list_parser = subparsers.add_parser("list", help="List available scenarios")
    list_parser.set_defaults(func=cmd_list)

    run_parser = subparsers.add_parser("run", help="Run a scenario")
    run_parser.add_argument("scenario", choices=list(SCENARIOS), help="Scenario to run")
    run_parser.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    context = build_context(args)
    try:
        func = args.func if args.command else cmd_menu
        func(context, args)
    except (KeyboardInterrupt, EOFError):
        print(file=context.console.err)
        sys.exit(130)


if __name__ == "__main__":
    main()
