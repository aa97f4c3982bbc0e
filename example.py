#!/usr/bin/env python3
"""
example.py - demo script: a long loop with console progress, a progress file
and periodic info messages.

Usage example:
  python example.py total:2000 delay:15 v:seip l:seiop
  python example.py ?            (help)

Verbosity flags (v): s status, e errors, i info, p progress bar, - nothing
Logging flags (l):   s status, e errors, i info, p progress file, o overwrite log
"""
import logging
import random
import sys
import time

from cliutil import config
from cliutil.core import CliUtil
from cliutil.params import ParamType
from cliutil.utils import setup_logging


def main():
    setup_logging(config.LOG_FILE, logging.DEBUG if config.VERBOSE else logging.INFO)
    cli = CliUtil(
        script_name="Example #1",
        script_version="1.0",
        script_description="Example script for cliutil: pretends to process a number of items, "
                           "reporting progress on the console and in a progress file.",
        verbosity_default="seip",
    )
    cli.declare_parameter("total", "t", 10000, ParamType.INTEGER, "Number of items to process")
    cli.declare_parameter("delay", "d", 15, ParamType.INTEGER, "Maximum delay per item [ms]")
    cli.declare_parameter("report", "r", "100", ParamType.INTEGER, "Info message every N items")

    if cli.get_parameter("help"):
        cli.display_help()
        return 0

    total = cli.get_parameter("total")
    max_delay = cli.get_parameter("delay")
    report_every = max(1, cli.get_parameter("report"))
    cli.set_options(progress_items_total=total)

    with cli:
        for i in range(1, total + 1):
            cli.update_progress(i)
            time.sleep(random.randint(0, max_delay) / 1000)
            if i % report_every == 0:
                cli.info(f"i is {i}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)
