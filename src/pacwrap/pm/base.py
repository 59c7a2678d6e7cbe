from __future__ import annotations

from typing import Optional, Sequence

from ..command import Cmd
from ..config import Config
from ..errors import BackendUnsupportedOperation
from ..executor import Executor, Mode, decode_output, grep_print
from ..logger import setup_logger
from ..printer import PROMPT_RUN, print_cmd
from ..strategy import Strategy

_logger = setup_logger()

# Every operation a backend can implement, named by its canonical identifier.
OPERATIONS = (
    "q", "qc", "qe", "qi", "qk", "ql", "qm", "qo", "qp", "qs", "qu",
    "r", "rn", "rns", "rs", "rss",
    "s", "sc", "scc", "sccc", "sg", "si", "sii", "sl", "ss", "su", "suy", "sw", "sy",
    "u",
)

Keywords = Sequence[str]
Flags = Sequence[str]


class PackageManager:
    """
    The capability set shared by all backends.

    Each of the 30 operations takes the user's keywords and the extra flags
    to pass through, and raises on failure. Anything a backend does not
    override ends up in ``unsupported``.
    """

    name = "unknown"

    def __init__(self, config: Config, executor: Optional[Executor] = None) -> None:
        self.cfg = config
        self.executor = executor or Executor(config, pm_name=self.name)
        if self.executor.pm_name is None:
            self.executor.pm_name = self.name

    # -------------------------
    # Helpers for implementations
    # -------------------------
    def code(self) -> int:
        """Exit status of the last command this invocation executed."""
        return self.executor.context.last_code

    def run(self, cmd: Cmd) -> None:
        self.run_with(cmd, Mode.CHECK_ALL, Strategy())

    def run_with(self, cmd: Cmd, mode: Mode, strategy: Strategy) -> None:
        self.executor.execute(cmd, mode, strategy, cleanup=self._clean_cache)

    def check_output(self, cmd: Cmd, mode: Mode = Mode.CAPTURE, strategy: Optional[Strategy] = None) -> bytes:
        return self.executor.execute(cmd, mode, strategy, cleanup=self._clean_cache)

    def search_regex(self, cmd: Sequence[str], kws: Keywords, flags: Flags) -> None:
        """Print the lines of ``cmd``'s output that contain every keyword."""
        c = Cmd.new(cmd).flags(flags)
        if not self.cfg.dry_run:
            print_cmd(c, PROMPT_RUN)
        out = self.check_output(c, Mode.CAPTURE, Strategy())
        grep_print(decode_output(c, out), kws)

    def _clean_cache(self, op: str) -> None:
        getattr(self, op)([], [])

    @classmethod
    def implements_op(cls, op: str) -> bool:
        return getattr(cls, op) is not getattr(PackageManager, op)

    def unsupported(self, op: str, kws: Keywords, flags: Flags) -> None:
        _logger.debug(f"{self.name}: `{op}` requested with kws={list(kws)} flags={list(flags)}")
        raise BackendUnsupportedOperation(self.name, op)

    # -------------------------
    # Query
    # -------------------------
    def q(self, kws: Keywords, flags: Flags) -> None:
        """Q generates a list of installed packages."""
        self.unsupported("q", kws, flags)

    def qc(self, kws: Keywords, flags: Flags) -> None:
        """Qc shows the changelog of a package."""
        self.unsupported("qc", kws, flags)

    def qe(self, kws: Keywords, flags: Flags) -> None:
        """Qe lists packages installed explicitly (not as dependencies)."""
        self.unsupported("qe", kws, flags)

    def qi(self, kws: Keywords, flags: Flags) -> None:
        """Qi displays local package information: name, version, description, etc."""
        self.unsupported("qi", kws, flags)

    def qk(self, kws: Keywords, flags: Flags) -> None:
        """Qk verifies one or more packages."""
        self.unsupported("qk", kws, flags)

    def ql(self, kws: Keywords, flags: Flags) -> None:
        """Ql displays files provided by local package."""
        self.unsupported("ql", kws, flags)

    def qm(self, kws: Keywords, flags: Flags) -> None:
        """Qm lists packages that are installed but not available in any installation source."""
        self.unsupported("qm", kws, flags)

    def qo(self, kws: Keywords, flags: Flags) -> None:
        """Qo queries the package which provides FILE."""
        self.unsupported("qo", kws, flags)

    def qp(self, kws: Keywords, flags: Flags) -> None:
        """Qp queries a package file given on the command line instead of the database."""
        self.unsupported("qp", kws, flags)

    def qs(self, kws: Keywords, flags: Flags) -> None:
        """Qs searches locally installed packages for names or descriptions."""
        self.unsupported("qs", kws, flags)

    def qu(self, kws: Keywords, flags: Flags) -> None:
        """Qu lists packages which have an update available."""
        self.unsupported("qu", kws, flags)

    # -------------------------
    # Remove
    # -------------------------
    def r(self, kws: Keywords, flags: Flags) -> None:
        """R removes a single package, leaving all of its dependencies installed."""
        self.unsupported("r", kws, flags)

    def rn(self, kws: Keywords, flags: Flags) -> None:
        """Rn removes a package and skips the generation of configuration backup files."""
        self.unsupported("rn", kws, flags)

    def rns(self, kws: Keywords, flags: Flags) -> None:
        """Rns removes a package and its unneeded dependencies, skipping configuration backups."""
        self.unsupported("rns", kws, flags)

    def rs(self, kws: Keywords, flags: Flags) -> None:
        """Rs removes a package and its dependencies not required by others nor explicitly installed."""
        self.unsupported("rs", kws, flags)

    def rss(self, kws: Keywords, flags: Flags) -> None:
        """Rss removes a package and its dependencies not required by any other installed package."""
        self.unsupported("rss", kws, flags)

    # -------------------------
    # Sync
    # -------------------------
    def s(self, kws: Keywords, flags: Flags) -> None:
        """S installs one or more packages by name."""
        self.unsupported("s", kws, flags)

    def sc(self, kws: Keywords, flags: Flags) -> None:
        """Sc removes cached packages that are not currently installed, and the unused sync database."""
        self.unsupported("sc", kws, flags)

    def scc(self, kws: Keywords, flags: Flags) -> None:
        """Scc removes all files from the cache."""
        self.unsupported("scc", kws, flags)

    def sccc(self, kws: Keywords, flags: Flags) -> None:
        """Sccc performs a deeper cleaning of the cache than Scc, where available."""
        self.unsupported("sccc", kws, flags)

    def sg(self, kws: Keywords, flags: Flags) -> None:
        """Sg lists all packages belonging to the GROUP."""
        self.unsupported("sg", kws, flags)

    def si(self, kws: Keywords, flags: Flags) -> None:
        """Si displays remote package information: name, version, description, etc."""
        self.unsupported("si", kws, flags)

    def sii(self, kws: Keywords, flags: Flags) -> None:
        """Sii displays packages which require X to be installed, aka reverse dependencies."""
        self.unsupported("sii", kws, flags)

    def sl(self, kws: Keywords, flags: Flags) -> None:
        """Sl displays a list of all packages in all installation sources."""
        self.unsupported("sl", kws, flags)

    def ss(self, kws: Keywords, flags: Flags) -> None:
        """Ss searches for package(s) by name, description and short description."""
        self.unsupported("ss", kws, flags)

    def su(self, kws: Keywords, flags: Flags) -> None:
        """Su updates outdated packages."""
        self.unsupported("su", kws, flags)

    def suy(self, kws: Keywords, flags: Flags) -> None:
        """Suy refreshes the local package database, then updates outdated packages."""
        self.unsupported("suy", kws, flags)

    def sw(self, kws: Keywords, flags: Flags) -> None:
        """Sw retrieves all packages from the server, but does not install/upgrade anything."""
        self.unsupported("sw", kws, flags)

    def sy(self, kws: Keywords, flags: Flags) -> None:
        """Sy refreshes the local package database."""
        self.unsupported("sy", kws, flags)

    # -------------------------
    # Update
    # -------------------------
    def u(self, kws: Keywords, flags: Flags) -> None:
        """U upgrades or adds local package file(s) and installs the required dependencies."""
        self.unsupported("u", kws, flags)
