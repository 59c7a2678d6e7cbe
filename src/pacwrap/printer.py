"""Console messages and prompts."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Optional, TextIO

from .logger import Colors

PROMPT_CANCELED = "Canceled"
PROMPT_PENDING = "Pending"
PROMPT_RUN = "Running"
PROMPT_DRYRUN = "Dry run"
PROMPT_ERROR = "Error"

# Right alignment applied to prompt labels.
PROMPT_INDENT = 9


def _paint(text: str, color: str, stream: TextIO) -> str:
    if not stream.isatty():
        return text
    return f"{color}{text}{Colors.RESET}"


def _label(prompt: str, color: str, stream: TextIO) -> str:
    return _paint(f"{prompt:>{PROMPT_INDENT}}", color, stream)


def print_cmd(cmd, prompt: str, stream: Optional[TextIO] = None) -> None:
    """Print the command after the given prompt, eg. ``  Running `apt update```."""
    stream = stream or sys.stdout
    print(f"{_label(prompt, Colors.GREEN + Colors.BOLD, stream)} `{cmd}`", file=stream, flush=True)


def print_msg(msg: str, prompt: str, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    print(f"{_label(prompt, Colors.GREEN + Colors.BOLD, stream)} {msg}", file=stream, flush=True)


def print_err(err, prompt: str = PROMPT_ERROR, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stderr
    print(f"{_label(prompt, Colors.BRIGHT_RED + Colors.BOLD, stream)} {err}", file=stream, flush=True)
    hint = getattr(err, "hint", None)
    if hint:
        print(f"{' ' * PROMPT_INDENT} hint: {hint}", file=stream, flush=True)


def print_question(question: str, options: str, stream: Optional[TextIO] = None) -> None:
    """Print a question without a trailing newline, eg. ``  Proceed [Yes/all/no]? ``."""
    stream = stream or sys.stdout
    q = _paint(f"{question:>{PROMPT_INDENT}}", Colors.YELLOW, stream)
    o = _paint(options, Colors.UNDERLINE, stream)
    print(f"{q} {o}? ", end="", file=stream, flush=True)


def highlight_matches(text: str, patterns: Iterable[str], stream: Optional[TextIO] = None) -> str:
    """
    Highlight occurrences of every pattern using ANSI colors.
    Returns plain text if output is not a TTY (piped to file).
    """
    stream = stream or sys.stdout
    patterns = [p for p in patterns if p]
    if not patterns or not stream.isatty():
        return text
    pattern_re = re.compile("|".join(re.escape(p) for p in patterns))
    return pattern_re.sub(lambda m: f"{Colors.BRIGHT_RED}{Colors.BOLD}{m.group(0)}{Colors.RESET}", text)
