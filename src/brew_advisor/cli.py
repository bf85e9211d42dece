"""Command-line interface for brew-advisor."""

import argparse
import logging
import sys

from brew_advisor import __version__, recommend
from brew_advisor.catalog import DEFAULT_CATALOG


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="brew-advisor",
        description="Recommend brewing parameters for a coffee bean and machine",
    )
    parser.add_argument("bean_id", nargs="?", help="Catalog bean id")
    parser.add_argument("machine_id", nargs="?", help="Catalog machine id")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List catalog beans and machines",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (default: GEMINI_API_KEY env var)",
    )
    parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Skip the AI provider and use the fallback table",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"brew-advisor {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        _print_catalog()
        return 0

    if not args.bean_id or not args.machine_id:
        parser.error("bean_id and machine_id are required unless --list is given")

    result = recommend(
        args.bean_id,
        args.machine_id,
        api_key=args.api_key,
        provider="none" if args.no_ai else None,
    )

    if args.json:
        print(result.model_dump_json(indent=2, by_alias=True, exclude_none=True))
    elif result.success:
        _print_formatted(result.data, result.fallback_used)
    else:
        print(f"Error: {result.error}", file=sys.stderr)

    return 0 if result.success else 1


def _print_catalog() -> None:
    print()
    print("  Beans")
    for bean in DEFAULT_CATALOG.beans:
        print(f"  {bean.id:>3}  {bean.brand} ({bean.origin}, {bean.roast_level})")
    print()
    print("  Machines")
    for machine in DEFAULT_CATALOG.machines:
        print(f"  {machine.id:>3}  {machine.brand} {machine.model} ({machine.type})")
    print()


def _print_formatted(recommendation, fallback_used: bool | None) -> None:
    """Print result in human-readable format."""
    print()
    print("  brew-advisor")
    print()

    fields = [
        ("Temperature", _format_temperature(recommendation.temperature)),
        ("Grind Size", recommendation.grind_size),
        ("Brew Time", _format_brew_time(recommendation.brew_time)),
        ("Water Ratio", recommendation.water_ratio.description),
        ("Source", "fallback table" if fallback_used else "AI"),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    print()
    print(f"  {recommendation.explanation}")
    print()


def _format_temperature(temperature) -> str:
    return f"{temperature.fahrenheit}°F / {temperature.celsius}°C"


def _format_brew_time(brew_time) -> str:
    return f"{brew_time.minutes}:{brew_time.seconds:02d}"


if __name__ == "__main__":
    sys.exit(main())
