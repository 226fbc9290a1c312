# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tidates.config import ConfigurationError, TidatesConfig, configure_logging, get_config
from tidates.domain.clock import local_today
from tidates.domain.model import EncodingOrder, TimeIndependentDate

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from tidates.domain.clock import Clock

log = logging.getLogger(__name__)


def _encoding_order(value: str) -> EncodingOrder:
    try:
        return EncodingOrder.from_label(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Sequence[str], config: TidatesConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse and compare time-independent dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    order_help = "Component order of the input: yearFirst or dayFirst (default: %(default)s)"

    normalize = subparsers.add_parser("normalize", help="Validate a date and print it")
    normalize.add_argument("text", help="Date text, e.g. 2020/07/31")
    normalize.add_argument(
        "--order",
        type=_encoding_order,
        default=config.default_order,
        help=order_help,
    )
    normalize.add_argument(
        "--output-order",
        type=_encoding_order,
        default=EncodingOrder.YEAR_FIRST,
        help="Component order of the printed date (default: %(default)s)",
    )

    years = subparsers.add_parser(
        "years-since",
        help="Approximate years elapsed between two dates",
    )
    years.add_argument("later", help="The more recent date")
    years.add_argument("earlier", help="The date to measure from")
    years.add_argument(
        "--order",
        type=_encoding_order,
        default=config.default_order,
        help=order_help,
    )

    today = subparsers.add_parser("today", help="Print today's date")
    today.add_argument(
        "--order",
        type=_encoding_order,
        default=config.default_order,
        help="Component order of the printed date (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _run(args: argparse.Namespace, *, clock: Clock) -> str:
    if args.command == "normalize":
        value = TimeIndependentDate.parse(args.text, args.order)
        return value.format(args.output_order)
    if args.command == "years-since":
        later = TimeIndependentDate.parse(args.later, args.order)
        earlier = TimeIndependentDate.parse(args.earlier, args.order)
        return str(later.years_since(earlier))
    if args.command == "today":
        return TimeIndependentDate.approximately_now(clock).format(args.order)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None, *, clock: Clock = local_today) -> None:
    """Main application entry point."""
    try:
        config = get_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(1)

    configure_logging(level=config.log_level)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list, config)

    try:
        output = _run(parsed_args, clock=clock)
    except ValueError as exc:
        log.error("Invalid date: %s", exc)  # noqa: TRY400
        sys.exit(2)

    print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env`` before reading configuration."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
