"""
pacwrap - pacman-style commands for whichever package manager is installed.

`pacwrap -Syu` refreshes and upgrades with apt, dnf or Homebrew alike,
with uniform dry runs, confirmation prompts and cache cleanup.

Modules:
- cli: Command-line interface entry point.
- dispatch: Flag canonicalization and backend dispatch.
- executor: Per-command execution state machine.
- strategy: Prompt, dry-run and no-cache policies.
- command: Immutable external command representation.
- prompter: Interactive yes/no/all confirmation.
- config: Configuration management.
- pm: Package manager backends.
"""

__version__ = "0.15.0"

from .cli import main

__all__ = ["main", "__version__"]
