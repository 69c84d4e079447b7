# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fiasmap.app import resolve_registry_settlements
from fiasmap.config import (
    ConfigurationError,
    configure_logging,
    get_registry_corrections,
    get_registry_paths,
)
from fiasmap.domain.resolution import ScanMode

from .report import render_report

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve FIAS settlements to their districts")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging (lists every unresolved settlement)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    settlements = subparsers.add_parser(
        "settlements", help="List settlements with their owning district"
    )
    settlements.add_argument(
        "--addr-obj",
        type=str,
        help="Path to the AS_ADDR_OBJ extract (defaults to $FIAS_ADDR_OBJ)",
    )
    settlements.add_argument(
        "--addr-obj-params",
        type=str,
        help="Path to the AS_ADDR_OBJ_PARAMS extract (defaults to $FIAS_ADDR_OBJ_PARAMS)",
    )
    settlements.add_argument(
        "--adm-hierarchy",
        type=str,
        help="Path to the AS_ADM_HIERARCHY extract (defaults to $FIAS_ADM_HIERARCHY)",
    )
    settlements.add_argument(
        "--corrections",
        type=str,
        help="JSON file with registry corrections (defaults to the built-in list)",
    )
    settlements.add_argument(
        "--scan-mode",
        type=ScanMode,
        choices=list(ScanMode),
        default=ScanMode.FUSED,
        help="Read the catalog once (fused) or once per stage (default: %(default)s)",
    )
    settlements.add_argument(
        "--show-unresolved",
        action="store_true",
        help="Append settlements that could not be tied to a district",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    configure_logging(level=logging.DEBUG if "--verbose" in args_list else logging.INFO)
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        paths = get_registry_paths(
            addr_obj=parsed_args.addr_obj,
            adm_hierarchy=parsed_args.adm_hierarchy,
            addr_obj_params=parsed_args.addr_obj_params,
        )
        corrections = get_registry_corrections(parsed_args.corrections)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = resolve_registry_settlements(
            paths,
            corrections=corrections,
            scan_mode=parsed_args.scan_mode,
        )
    except Exception:
        log.exception("Fatal error during settlement resolution")
        sys.exit(1)

    for line in render_report(result, show_unresolved=parsed_args.show_unresolved):
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
