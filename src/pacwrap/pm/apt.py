"""The Advanced Package Tool (Debian, Ubuntu and derivatives)."""

from __future__ import annotations

from ..command import Cmd
from ..executor import Mode
from ..strategy import NoCacheStrategy, PromptStrategy, Strategy
from .base import Flags, Keywords, PackageManager

STRAT_PROMPT = Strategy(prompt=PromptStrategy.native_prompt("--yes"))

STRAT_INSTALL = Strategy(
    prompt=PromptStrategy.native_prompt("--yes"),
    no_cache=NoCacheStrategy.SCC,
)


class Apt(PackageManager):
    name = "apt"

    def q(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt", "list", "--installed"]).kws(kws).flags(flags))

    def qc(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt-get", "changelog"]).kws(kws).flags(flags))

    def qe(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt-mark", "showmanual"]).kws(kws).flags(flags))

    def qi(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dpkg-query", "-s"]).kws(kws).flags(flags))

    def ql(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dpkg-query", "-L"]).kws(kws).flags(flags))

    def qo(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dpkg-query", "-S"]).kws(kws).flags(flags))

    def qp(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dpkg-deb", "-I"]).kws(kws).flags(flags))

    def qu(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.with_sudo(["apt", "upgrade", "--trivial-only"]).kws(kws).flags(flags))

    def r(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["apt", "remove"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def rn(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["apt", "purge"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def rns(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(
            Cmd.with_sudo(["apt", "autoremove", "--purge"]).kws(kws).flags(flags),
            Mode.CHECK_ALL,
            STRAT_PROMPT,
        )

    def rs(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["apt", "autoremove"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def s(self, kws: Keywords, flags: Flags) -> None:
        base = ["apt", "install"] if self.cfg.needed else ["apt", "install", "--reinstall"]
        self.run_with(Cmd.with_sudo(base).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)

    def sc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["apt", "clean"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def scc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["apt", "autoclean"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def si(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt", "show"]).kws(kws).flags(flags))

    def sii(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt", "rdepends"]).kws(kws).flags(flags))

    def sl(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt", "list"]).kws(kws).flags(flags))

    def ss(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["apt", "search"]).kws(kws).flags(flags))

    def su(self, kws: Keywords, flags: Flags) -> None:
        if kws:
            self.s(kws, flags)
            return
        self.run_with(Cmd.with_sudo(["apt", "upgrade"]).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)
        self.run_with(Cmd.with_sudo(["apt", "dist-upgrade"]).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)

    def suy(self, kws: Keywords, flags: Flags) -> None:
        self.sy([], flags)
        self.su(kws, flags)

    def sw(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(
            Cmd.with_sudo(["apt", "install", "--download-only"]).kws(kws).flags(flags),
            Mode.CHECK_ALL,
            STRAT_PROMPT,
        )

    def sy(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.with_sudo(["apt", "update"]).flags(flags))
        if kws:
            self.s(kws, flags)

    def u(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["apt", "install"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)
