"""
Declarative execution policies attached to a single command.

A ``Strategy`` bundles three independent axes. Every axis defaults to its
zero value, so call sites only spell out what differs::

    Strategy(prompt=PromptStrategy.native_prompt("--yes"), no_cache=NoCacheStrategy.SCC)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class PromptKind(Enum):
    NONE = "none"
    NATIVE = "native"
    CUSTOM = "custom"


@dataclass(frozen=True)
class PromptStrategy:
    """How to ask for confirmation before running a command.

    - ``NONE``: run without asking.
    - ``NATIVE``: the backend asks on its own; ``flags`` (eg. ``--yes``) are
      appended when ``no_confirm`` is set.
    - ``CUSTOM``: pacwrap asks yes/no/all itself unless ``no_confirm`` is set.
    """

    kind: PromptKind = PromptKind.NONE
    flags: Tuple[str, ...] = ()

    @classmethod
    def none(cls) -> "PromptStrategy":
        return cls()

    @classmethod
    def native_prompt(cls, *flags: str) -> "PromptStrategy":
        return cls(PromptKind.NATIVE, tuple(flags))

    @classmethod
    def custom_prompt(cls) -> "PromptStrategy":
        return cls(PromptKind.CUSTOM)


class DryRunKind(Enum):
    PRINT_CMD = "print_cmd"
    WITH_FLAGS = "with_flags"


@dataclass(frozen=True)
class DryRunStrategy:
    """What a dry run means: print the command, or let the backend simulate it."""

    kind: DryRunKind = DryRunKind.PRINT_CMD
    flags: Tuple[str, ...] = ()

    @classmethod
    def print_cmd(cls) -> "DryRunStrategy":
        return cls()

    @classmethod
    def with_flags(cls, *flags: str) -> "DryRunStrategy":
        return cls(DryRunKind.WITH_FLAGS, tuple(flags))


class NoCacheKind(Enum):
    NONE = "none"
    # Run the backend's own cache-cleaning operation afterwards.
    SC = "sc"
    SCC = "scc"
    SCCC = "sccc"
    # Append flags to the command itself.
    WITH_FLAGS = "with_flags"


@dataclass(frozen=True)
class NoCacheStrategy:
    kind: NoCacheKind = NoCacheKind.NONE
    flags: Tuple[str, ...] = ()

    @classmethod
    def none(cls) -> "NoCacheStrategy":
        return cls()

    @classmethod
    def with_flags(cls, *flags: str) -> "NoCacheStrategy":
        return cls(NoCacheKind.WITH_FLAGS, tuple(flags))

    @property
    def cleanup_op(self):
        """Name of the cleanup operation to run after success, if any."""
        if self.kind in (NoCacheKind.SC, NoCacheKind.SCC, NoCacheKind.SCCC):
            return self.kind.value
        return None


NoCacheStrategy.SC = NoCacheStrategy(NoCacheKind.SC)
NoCacheStrategy.SCC = NoCacheStrategy(NoCacheKind.SCC)
NoCacheStrategy.SCCC = NoCacheStrategy(NoCacheKind.SCCC)


@dataclass(frozen=True)
class Strategy:
    prompt: PromptStrategy = field(default_factory=PromptStrategy)
    dry_run: DryRunStrategy = field(default_factory=DryRunStrategy)
    no_cache: NoCacheStrategy = field(default_factory=NoCacheStrategy)
