from __future__ import annotations

import os
import shlex
import sys
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

SUDO = "sudo"


def is_root() -> bool:
    """True when no privilege elevation is needed (or possible)."""
    if sys.platform == "win32" or not hasattr(os, "geteuid"):
        return True
    return os.geteuid() == 0


@dataclass(frozen=True)
class Cmd:
    """
    One external command: ``[sudo] program base-args... keywords... extra-flags...``.

    Instances are immutable; ``kws()`` and ``flags()`` return extended copies.
    The arguments are never joined into a shell string for execution.
    """

    cmd: Tuple[str, ...]
    keywords: Tuple[str, ...] = ()
    extra_flags: Tuple[str, ...] = ()
    sudo: bool = False

    def __post_init__(self) -> None:
        if not self.cmd:
            raise ValueError("Cmd needs at least a program name")

    @classmethod
    def new(cls, cmd: Iterable[str]) -> "Cmd":
        return cls(cmd=tuple(cmd))

    @classmethod
    def with_sudo(cls, cmd: Iterable[str]) -> "Cmd":
        return cls(cmd=tuple(cmd), sudo=True)

    def kws(self, kws: Iterable[str]) -> "Cmd":
        return replace(self, keywords=self.keywords + tuple(kws))

    def flags(self, flags: Iterable[str]) -> "Cmd":
        return replace(self, extra_flags=self.extra_flags + tuple(flags))

    def with_privilege(self, sudo: bool) -> "Cmd":
        return replace(self, sudo=sudo)

    def needs_sudo(self, root: Optional[bool] = None) -> bool:
        if not self.sudo:
            return False
        return not (is_root() if root is None else root)

    def argv(self, root: Optional[bool] = None) -> List[str]:
        prefix = [SUDO] if self.needs_sudo(root) else []
        return prefix + list(self.cmd) + list(self.keywords) + list(self.extra_flags)

    def __str__(self) -> str:
        return shlex.join(self.argv())
