"""Command line entry point.

Usage:
    cannon (random|affinity)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cannon.components.strategies import strategy_from_name
from cannon.instrumentation.metrics import MetricsSink
from cannon.logging_config import configure_from_env, enable_console_logging
from cannon.reporter import ThroughputReporter
from cannon.topology import NUM_WORKERS, REPORT_INTERVAL_S, default_servers
from cannon.workload import WorkloadGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Parser used only for the usage line and error exit.

    The single argument is never parsed as an option: "-x" or "-h" is a
    strategy name like any other and falls back to affinity.
    """
    return argparse.ArgumentParser(
        prog="cannon",
        usage="%(prog)s (random|affinity)",
        description="Cannon, a distributed systems modelling tool.",
        add_help=False,
    )


def run(strategy_name: str) -> None:
    """Run the simulation until interrupted."""
    sink = MetricsSink()
    servers = default_servers(sink)
    logger.info("servers: %s", servers)

    strategy = strategy_from_name(strategy_name, servers)
    workload = WorkloadGenerator(strategy, num_workers=NUM_WORKERS)
    workload.start()

    ThroughputReporter(sink, interval_s=REPORT_INTERVAL_S).run()
    logger.info("goodbye")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        build_parser().error(f"expected exactly one argument, got {len(args)}")

    if not configure_from_env():
        enable_console_logging(level="INFO")

    logger.info("Hello")
    run(args[0])
    return 0
