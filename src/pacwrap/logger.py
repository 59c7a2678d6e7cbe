import logging
import os


class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"
    BLUE = "\033[34m"
    BRIGHT_RED = "\033[91m"
    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"


class ColorFormatter(logging.Formatter):
    COLOR_MAP = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.RED + Colors.BOLD,
    }

    def format(self, record):
        color = self.COLOR_MAP.get(record.levelno, Colors.RESET)
        message = super().format(record)
        return f"{color}{message}{Colors.RESET}"


def _default_level() -> int:
    return logging.DEBUG if os.environ.get("PACWRAP_DEBUG") else logging.INFO


def setup_logger(name="pacwrap", level=None):
    logger = logging.getLogger(name)
    # Prevent adding multiple handlers in case of repeated calls
    if logger.handlers:
        return logger
    level = _default_level() if level is None else level
    logger.setLevel(level)
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    ch.setFormatter(ColorFormatter("%(message)s"))
    logger.addHandler(ch)
    return logger


def set_level(level: int, name: str = "pacwrap") -> None:
    """Adjust verbosity after the logger has been created (used by -v)."""
    logging.getLogger(name).setLevel(level)
