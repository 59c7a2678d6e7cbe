"""The Homebrew package manager."""

from __future__ import annotations

import sys

from ..command import Cmd
from ..executor import Mode
from ..strategy import DryRunStrategy, NoCacheStrategy, PromptStrategy, Strategy
from .base import Flags, Keywords, PackageManager

STRAT_PROMPT = Strategy(prompt=PromptStrategy.custom_prompt())

STRAT_INSTALL = Strategy(
    prompt=PromptStrategy.custom_prompt(),
    no_cache=NoCacheStrategy.SCC,
)

STRAT_CLEANUP = Strategy(
    prompt=PromptStrategy.custom_prompt(),
    dry_run=DryRunStrategy.with_flags("--dry-run"),
)


class Brew(PackageManager):
    name = "brew"

    def q(self, kws: Keywords, flags: Flags) -> None:
        if kws:
            self.qs(kws, flags)
            return
        self.run(Cmd.new(["brew", "list"]).flags(flags))

    def qc(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "log"]).kws(kws).flags(flags))

    def qi(self, kws: Keywords, flags: Flags) -> None:
        self.si(kws, flags)

    def ql(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "list"]).kws(kws).flags(flags))

    def qs(self, kws: Keywords, flags: Flags) -> None:
        # With several keywords, only lines matching all of them are shown.
        # `brew list` only lists both formulae and casks on a tty.
        self.search_regex(["brew", "list", "--formula"], kws, flags)
        if sys.platform == "darwin":
            self.search_regex(["brew", "list", "--cask"], kws, flags)

    def qu(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "outdated"]).kws(kws).flags(flags))

    def r(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.new(["brew", "uninstall"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def rs(self, kws: Keywords, flags: Flags) -> None:
        self.r(kws, flags)
        self.run_with(Cmd.new(["brew", "autoremove"]).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def s(self, kws: Keywords, flags: Flags) -> None:
        # `brew reinstall` installs missing packages too, which is what `pacman -S` does.
        base = ["brew", "install"] if self.cfg.needed else ["brew", "reinstall"]
        self.run_with(Cmd.new(base).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)

    def sc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.new(["brew", "cleanup"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_CLEANUP)

    def scc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.new(["brew", "cleanup", "-s"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_CLEANUP)

    def si(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "info"]).kws(kws).flags(flags))

    def sii(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "uses"]).kws(kws).flags(flags))

    def ss(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "search"]).kws(kws).flags(flags))

    def su(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.new(["brew", "upgrade"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)

    def suy(self, kws: Keywords, flags: Flags) -> None:
        self.sy([], flags)
        self.su(kws, flags)

    def sw(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.new(["brew", "fetch"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def sy(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["brew", "update"]).flags(flags))
        if kws:
            self.s(kws, flags)
