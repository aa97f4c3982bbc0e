# cliutil/utils.py
import logging
import os
import sys
from tqdm.utils import disp_len

_logger = None


def setup_logging(log_file=None, level=logging.INFO):
    global _logger
    logger = logging.getLogger("cliutil")
    logger.setLevel(level)
    # remove existing handlers to avoid duplicates
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    # console line belongs to the progress display -> only warnings go to stderr
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.WARNING)
    sh.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(sh)
    if log_file:
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(fh)
        logger.info("Logging initialized. Log file: %s", os.path.abspath(log_file))
    _logger = logger
    return logger


def get_logger():
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def vprint(*args, **kwargs):
    # verbose print -> goes to logger.debug
    get_logger().debug(" ".join(str(a) for a in args))


def display_width(text):
    # terminal columns, ignoring ANSI codes and counting wide glyphs twice
    return disp_len(text)


def pad_right(text, width):
    return text + " " * max(0, width - display_width(text))


def round_half_up(value, digits=0):
    """Round half away from zero (built-in round() rounds half to even)."""
    factor = 10 ** digits
    scaled = abs(value) * factor
    rounded = int(scaled + 0.5) / factor
    if digits == 0:
        rounded = int(rounded)
    return -rounded if value < 0 else rounded
