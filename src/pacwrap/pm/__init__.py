"""
Package manager backends.

Modules:
- base: the 30-operation capability set and its shared helpers.
- apt, brew, dnf: concrete backends.
"""

from __future__ import annotations

import shutil
import sys
from typing import Dict, List, Optional, Type

from ..config import Config
from ..executor import Executor
from ..logger import setup_logger
from .apt import Apt
from .base import OPERATIONS, PackageManager
from .brew import Brew
from .dnf import Dnf

_logger = setup_logger()


class Unknown(PackageManager):
    """Selected when no supported package manager is found; supports nothing."""

    name = "unknown"


BACKENDS: Dict[str, Type[PackageManager]] = {
    "apt": Apt,
    "brew": Brew,
    "dnf": Dnf,
}


def detection_order(platform: Optional[str] = None) -> List[str]:
    platform = platform or sys.platform
    if platform == "darwin":
        return ["brew"]
    if platform.startswith("linux"):
        return ["apt", "dnf", "brew"]
    return []


def detect(platform: Optional[str] = None) -> str:
    """Name of the first supported package manager found on PATH, else ``unknown``."""
    for name in detection_order(platform):
        if shutil.which(name):
            _logger.debug(f"Detected package manager: {name}")
            return name
    _logger.debug("No supported package manager detected")
    return Unknown.name


def create(config: Config, executor: Optional[Executor] = None) -> PackageManager:
    """Build the backend named by ``config.default_pm``, detecting one if unset."""
    name = config.default_pm or detect()
    cls = BACKENDS.get(name)
    if cls is None:
        if name != Unknown.name:
            _logger.warning(f"Unsupported package manager '{name}'; no operation will be available.")
        cls = Unknown
    if executor is None:
        executor = Executor(config, pm_name=cls.name)
    return cls(config, executor)


def compat_table() -> str:
    """Which operations each backend implements, as a text table."""
    names = sorted(BACKENDS)
    width = max(len("Module"), *(len(n) for n in names))
    col = max(len(op) for op in OPERATIONS)
    header = f"{'Module':<{width}} " + " ".join(f"{op:<{col}}" for op in OPERATIONS)
    lines = [header, "-" * len(header)]
    for name in names:
        cls = BACKENDS[name]
        marks = " ".join(f"{'*' if cls.implements_op(op) else '':<{col}}" for op in OPERATIONS)
        lines.append(f"{name:<{width}} {marks}".rstrip())
    return "\n".join(lines)


__all__ = ["BACKENDS", "OPERATIONS", "PackageManager", "Unknown", "Apt", "Brew", "Dnf", "create", "detect", "compat_table"]
