import argparse
import logging
import os
import sys

from logic.services import WarehouseManager
from presentation.cli import run_shell
from presentation.demos import (
    run_finance_demo,
    run_grading_demo,
    run_healthcare_demo,
    run_inventory_demo,
    run_warehouse_demo,
)
from utils.logging_config import setup_logging

# --- Configuration Constants ---
DEFAULT_INVENTORY_PATH = "inventory.json"
DEFAULT_GRADES_INPUT = "students_input.txt"
DEFAULT_GRADES_REPORT = "students_report.txt"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "WARNING"
DEMO_ORDER = ["finance", "healthcare", "warehouse", "grading", "inventory"]

logger = logging.getLogger(__name__)


def _default_log_level():
    """Reads STOCKKEEPER_LOG_LEVEL, ignoring values that are not a known level."""
    level = os.environ.get("STOCKKEEPER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        logger.warning("Ignoring unknown STOCKKEEPER_LOG_LEVEL %r", level)
        return DEFAULT_LOG_LEVEL
    return level


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="stockkeeper",
        description="Finance, healthcare, warehouse, grading and inventory exercises.",
    )
    parser.add_argument("--log-level", default=_default_log_level(),
                        choices=LOG_LEVELS,
                        type=str.upper, help="Logging verbosity (stderr).")
    parser.add_argument("--log-file", help="Also write logs to this rotating file.")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("all", help="Run every demo in order (default).")
    subparsers.add_parser("finance", help="Transaction processing demo.")
    healthcare = subparsers.add_parser("healthcare", help="Patient and prescription lookup demo.")
    healthcare.add_argument("--patient", type=int, default=2, help="Patient ID to list prescriptions for.")
    subparsers.add_parser("warehouse", help="Warehouse inventory demo.")
    grading = subparsers.add_parser("grading", help="Grade report generation.")
    grading.add_argument("input", nargs="?", help=f"Score sheet (default: demo '{DEFAULT_GRADES_INPUT}').")
    grading.add_argument("--output", default=DEFAULT_GRADES_REPORT, help="Report file to write.")
    inventory = subparsers.add_parser("inventory", help="JSON inventory persistence demo.")
    inventory.add_argument("--path", default=DEFAULT_INVENTORY_PATH, help="JSON file to save and load.")
    subparsers.add_parser("shell", help="Interactive warehouse stock shell.")
    return parser


def _run(command, args):
    if command == "finance":
        run_finance_demo()
    elif command == "healthcare":
        run_healthcare_demo(getattr(args, "patient", 2))
    elif command == "warehouse":
        run_warehouse_demo()
    elif command == "grading":
        input_path = getattr(args, "input", None)
        return run_grading_demo(
            input_path or DEFAULT_GRADES_INPUT,
            getattr(args, "output", DEFAULT_GRADES_REPORT),
            create_demo_input=input_path is None,
        )
    elif command == "inventory":
        return run_inventory_demo(getattr(args, "path", DEFAULT_INVENTORY_PATH))
    elif command == "shell":
        manager = WarehouseManager()
        manager.seed_data()
        run_shell(manager)
    return 0


def main(argv=None):
    """Return 0 when every requested demo completes successfully."""
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    command = args.command or "all"
    if command != "all":
        return _run(command, args)

    status = 0
    for index, name in enumerate(DEMO_ORDER):
        if index:
            print()
        print(f"######## {name.title()} ########")
        status = _run(name, args) or status
    logger.info("Finished %d demos with status %d", len(DEMO_ORDER), status)
    return status


if __name__ == "__main__":
    sys.exit(main())
