"""
Turn a parsed pacman-style request into a call on the active backend.

``-S -y -u`` and ``-Suy`` both become the identifier ``suy``, which is then
looked up as a method on the selected ``PackageManager``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from .config import Config
from .errors import UnrecognizedOperation
from .logger import setup_logger
from .pm import OPERATIONS, PackageManager, create

_logger = setup_logger()


class FlagKind(Enum):
    # Contributes its letter once, however often it is given.
    LETTER = "letter"
    # Contributes its letter once per occurrence.
    COUNTER = "counter"
    # Sets a Config field instead of contributing a letter.
    ALIAS = "alias"


class FlagRule(NamedTuple):
    kind: FlagKind
    target: Optional[str] = None


LETTER = FlagRule(FlagKind.LETTER)
COUNTER = FlagRule(FlagKind.COUNTER)
DRY_RUN = FlagRule(FlagKind.ALIAS, "dry_run")

OPERATION_NAMES = {"Q": "query", "R": "remove", "S": "sync", "U": "update"}

FLAG_TABLES: Dict[str, Dict[str, FlagRule]] = {
    "Q": {
        "c": LETTER,
        "e": LETTER,
        "i": COUNTER,
        "k": LETTER,
        "l": LETTER,
        "m": LETTER,
        "o": LETTER,
        "p": LETTER,
        "s": LETTER,
        "u": LETTER,
    },
    "R": {
        "n": LETTER,
        "p": DRY_RUN,
        "s": COUNTER,
    },
    "S": {
        "c": COUNTER,
        "g": LETTER,
        "i": COUNTER,
        "l": LETTER,
        "p": DRY_RUN,
        "s": LETTER,
        "u": LETTER,
        "w": LETTER,
        "y": LETTER,
    },
    "U": {
        "p": DRY_RUN,
    },
}


@dataclass
class Request:
    """Everything the engine needs from the command line."""

    operation: str
    flags: Mapping[str, int] = field(default_factory=dict)
    keywords: Sequence[str] = ()
    extra_flags: Sequence[str] = ()


def canonicalize(operation: str, flags: Mapping[str, int], config: Config) -> Tuple[str, Config]:
    """
    Reduce an operation and its sub-flag counts to an operation identifier.

    Returns the identifier and the config, which differs from the one passed
    in when an aliased flag (eg. ``-Sp``) was given.
    """
    table = FLAG_TABLES.get(operation)
    if table is None:
        raise UnrecognizedOperation(f"Invalid operation `-{operation}`")

    letters: List[str] = []
    for name, count in flags.items():
        if not count:
            continue
        rule = table.get(name)
        if rule is None:
            raise UnrecognizedOperation(
                f"Invalid flag `-{name}` for {OPERATION_NAMES[operation]} (`-{operation}`)"
            )
        if rule.kind is FlagKind.LETTER:
            letters.append(name)
        elif rule.kind is FlagKind.COUNTER:
            letters.extend(name * int(count))
        else:
            config = replace(config, **{rule.target: True})

    ident = (operation + "".join(sorted(letters))).lower()
    if ident not in OPERATIONS:
        raise UnrecognizedOperation(
            f"Invalid flag combination `-{operation}{''.join(sorted(letters))}`",
            hint="see `pacwrap --compat-table` for the supported operations",
        )
    _logger.debug(f"Canonicalized -{operation} {dict(flags)} to `{ident}`")
    return ident, config


def dispatch(
    request: Request,
    config: Config,
    factory: Callable[[Config], PackageManager] = create,
) -> int:
    """Run the request on the selected backend and return the final exit status."""
    ident, config = canonicalize(request.operation, request.flags, config)
    pm = factory(config)
    _logger.debug(f"Dispatching `{ident}` to {pm.name}")
    getattr(pm, ident)(list(request.keywords), list(request.extra_flags))
    return pm.code()
