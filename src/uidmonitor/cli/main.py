"""
Command-line interface for the uid I/O monitor.

Loads configuration, seeds a UidMonitor from the configured raw stats source,
runs a number of periodic report cycles and prints the resulting history as
a table.
"""

import argparse
import logging
import signal
import sys
import threading
import tomllib
from pathlib import Path
from typing import List, Optional

import polars as pl

from ..collectors import PasswdNameResolver, create_stats_source
from ..config import get_config, set_config_path
from ..models.io_usage import ChargerState
from ..monitoring import PeriodicReporter, UidMonitor
from ..storage import records_to_dataframe
from ..validation import ValidationError, handle_cli_error

# --- Logging Setup ---
LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sample per-uid storage I/O and print the bucketed history."
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config.toml (defaults to conf/config.toml).",
    )
    parser.add_argument(
        "--cycles",
        type=int,
        default=1,
        help="Number of periodic report cycles to run before dumping.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between report cycles. Defaults to the configured interval.",
    )
    parser.add_argument(
        "--hours",
        type=float,
        help="Only show buckets from the last N hours (0 = all).",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        help="Only show uids with more than this many bytes in a bucket.",
    )
    parser.add_argument(
        "--charger",
        choices=["on", "off"],
        help="Initial charger state.",
    )
    parser.add_argument(
        "--source",
        choices=["proc", "psutil"],
        help="Raw stats source. Defaults to the configured source.",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for the uid I/O monitor.

    Raises:
        SystemExit: On configuration errors, invalid arguments or an
            unavailable stats source.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    if args.config:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except (FileNotFoundError, KeyError, ValidationError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            logger=logger,
        )

    monitor_config = app_config.monitor
    logging.getLogger().setLevel(monitor_config.log_level)

    if args.cycles < 0:
        handle_cli_error(
            error=ValidationError(f"--cycles must be >= 0, got {args.cycles}"),
            context="argument validation",
            exit_code=1,
            logger=logger,
        )

    interval = args.interval if args.interval is not None else monitor_config.report_interval_seconds
    hours = args.hours if args.hours is not None else monitor_config.dump_hours
    threshold = args.threshold if args.threshold is not None else monitor_config.dump_threshold
    charger_state = (
        ChargerState.from_string(args.charger)
        if args.charger
        else monitor_config.initial_charger_state
    )
    source_type = args.source or monitor_config.source.type

    source = create_stats_source(source_type, monitor_config.source.path)
    monitor = UidMonitor(source, name_resolver=PasswdNameResolver())
    if not monitor.enabled():
        logger.error(f"Uid I/O stats source '{source_type}' is not available on this system")
        sys.exit(2)

    if not monitor.init(charger_state):
        logger.warning("Initial uid I/O stats read failed; first cycle will charge full counters")

    shutdown_requested = threading.Event()

    def signal_handler(signum, frame):
        logger.info(f"Signal {signal.strsignal(signum)} received. Dumping and exiting...")
        shutdown_requested.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        reporter = PeriodicReporter(monitor, interval)
    except ValueError as e:
        handle_cli_error(error=e, context="argument validation", exit_code=1, logger=logger)

    if args.cycles > 0:
        logger.info(f"Running {args.cycles} report cycles every {interval}s")
        reporter.start()
        while not shutdown_requested.is_set() and reporter.cycles_completed < args.cycles:
            shutdown_requested.wait(min(interval, 0.5))
        reporter.stop()

    try:
        records = monitor.dump(hours, threshold, force_report=True)
    except ValidationError as e:
        handle_cli_error(error=e, context="dump", exit_code=1, logger=logger)

    df = records_to_dataframe(records)
    with pl.Config(tbl_rows=-1, tbl_cols=-1):
        print(df)
    logger.info(f"Dumped {len(records)} buckets ({len(df)} rows)")


if __name__ == "__main__":
    main_cli()
