"""The Dandified YUM package manager (Fedora, RHEL and derivatives)."""

from __future__ import annotations

from ..command import Cmd
from ..executor import Mode
from ..strategy import NoCacheStrategy, PromptStrategy, Strategy
from .base import Flags, Keywords, PackageManager

STRAT_PROMPT = Strategy(prompt=PromptStrategy.native_prompt("-y"))

STRAT_INSTALL = Strategy(
    prompt=PromptStrategy.native_prompt("-y"),
    no_cache=NoCacheStrategy.SCC,
)


class Dnf(PackageManager):
    name = "dnf"

    def q(self, kws: Keywords, flags: Flags) -> None:
        if kws:
            self.qs(kws, flags)
            return
        self.run(Cmd.new(["rpm", "-qa", "--qf", "%{NAME} %{VERSION}\\n"]).flags(flags))

    def qc(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["rpm", "-q", "--changelog"]).kws(kws).flags(flags))

    def qe(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "repoquery", "--userinstalled"]).kws(kws).flags(flags))

    def qi(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "info", "--installed"]).kws(kws).flags(flags))

    def qk(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["rpm", "-V"]).kws(kws).flags(flags))

    def ql(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["rpm", "-ql"]).kws(kws).flags(flags))

    def qm(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "list", "--extras"]).kws(kws).flags(flags))

    def qo(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["rpm", "-qf"]).kws(kws).flags(flags))

    def qp(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["rpm", "-qip"]).kws(kws).flags(flags))

    def qs(self, kws: Keywords, flags: Flags) -> None:
        self.search_regex(["rpm", "-qa"], kws, flags)

    def qu(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "list", "--upgrades"]).kws(kws).flags(flags))

    def r(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "remove"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def rs(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "autoremove"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def s(self, kws: Keywords, flags: Flags) -> None:
        base = ["dnf", "install"] if self.cfg.needed else ["dnf", "reinstall"]
        self.run_with(Cmd.with_sudo(base).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)

    def sc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "clean", "expire-cache"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def scc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "clean", "packages"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def sccc(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "clean", "all"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_PROMPT)

    def sg(self, kws: Keywords, flags: Flags) -> None:
        sub = ["dnf", "group", "info"] if kws else ["dnf", "group", "list"]
        self.run(Cmd.new(sub).kws(kws).flags(flags))

    def si(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "info"]).kws(kws).flags(flags))

    def sii(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "repoquery", "--installed", "--whatrequires"]).kws(kws).flags(flags))

    def sl(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "list", "--available"]).kws(kws).flags(flags))

    def ss(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.new(["dnf", "search"]).kws(kws).flags(flags))

    def su(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "upgrade"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)

    def suy(self, kws: Keywords, flags: Flags) -> None:
        self.sy([], flags)
        self.su(kws, flags)

    def sw(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(
            Cmd.with_sudo(["dnf", "install", "--downloadonly"]).kws(kws).flags(flags),
            Mode.CHECK_ALL,
            STRAT_PROMPT,
        )

    def sy(self, kws: Keywords, flags: Flags) -> None:
        self.run(Cmd.with_sudo(["dnf", "makecache", "--refresh"]).flags(flags))
        if kws:
            self.s(kws, flags)

    def u(self, kws: Keywords, flags: Flags) -> None:
        self.run_with(Cmd.with_sudo(["dnf", "install"]).kws(kws).flags(flags), Mode.CHECK_ALL, STRAT_INSTALL)
