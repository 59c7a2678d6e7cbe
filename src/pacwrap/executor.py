from __future__ import annotations

import subprocess
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .command import Cmd
from .config import Config
from .context import InvocationContext
from .errors import (
    InvalidOutputEncoding,
    PacwrapError,
    ProcessExitFailure,
    ProcessSpawnFailure,
    PromptCanceled,
)
from .logger import setup_logger
from .printer import PROMPT_DRYRUN, PROMPT_PENDING, PROMPT_RUN, highlight_matches, print_cmd
from .prompter import Answer, Prompter
from .strategy import DryRunKind, NoCacheKind, PromptKind, Strategy

_logger = setup_logger()

# Exit status reported when the program could not be started at all.
SPAWN_FAILURE_CODE = 127


class Mode(Enum):
    """How the child process' I/O is handled."""

    # Echo the command, then let the child use the terminal.
    CHECK_ALL = "check_all"
    # Let the child use the terminal without echoing the command.
    INHERIT = "inherit"
    # Buffer stdout for the caller; stderr still goes to the terminal.
    CAPTURE = "capture"
    # Discard all output; only the exit status matters.
    MUTE = "mute"


class State(Enum):
    INIT = "init"
    DRY_RUN_CHECK = "dry_run_check"
    PROMPT_CHECK = "prompt_check"
    RUNNING = "running"
    CLEANUP_CHECK = "cleanup_check"
    DONE = "done"
    FAILED = "failed"


class Executor:
    """
    Runs commands for one invocation, applying a Strategy against the Config.

    Each call to ``execute`` walks
    ``INIT -> DRY_RUN_CHECK -> PROMPT_CHECK -> RUNNING -> CLEANUP_CHECK -> DONE``
    and ends in ``FAILED`` when any step raises.
    """

    def __init__(
        self,
        config: Config,
        context: Optional[InvocationContext] = None,
        prompter: Optional[Prompter] = None,
        pm_name: Optional[str] = None,
    ) -> None:
        self.config = config
        self.context = context or InvocationContext()
        self.prompter = prompter or Prompter()
        self.pm_name = pm_name
        self.state = State.INIT

    def _transition(self, cmd: Cmd, state: State) -> None:
        _logger.debug(f"[{self.pm_name or '-'}] `{cmd}`: {self.state.value} -> {state.value}")
        self.state = state

    def execute(
        self,
        cmd: Cmd,
        mode: Mode = Mode.CHECK_ALL,
        strategy: Optional[Strategy] = None,
        cleanup: Optional[Callable[[str], None]] = None,
    ) -> bytes:
        """
        Run ``cmd`` to completion and return its stdout (``Mode.CAPTURE`` only,
        otherwise ``b""``). ``cleanup`` is called with the name of the
        cache-cleaning operation when the no-cache policy asks for one.
        """
        strategy = strategy or Strategy()
        self.state = State.INIT
        try:
            return self._execute(cmd, mode, strategy, cleanup)
        except (PacwrapError, KeyboardInterrupt):
            self._transition(cmd, State.FAILED)
            raise

    def _execute(self, cmd: Cmd, mode: Mode, strategy: Strategy, cleanup) -> bytes:
        cfg = self.config

        self._transition(cmd, State.DRY_RUN_CHECK)
        if cfg.no_cache and strategy.no_cache.kind is NoCacheKind.WITH_FLAGS:
            cmd = cmd.flags(strategy.no_cache.flags)
        if cfg.dry_run:
            if strategy.dry_run.kind is DryRunKind.PRINT_CMD:
                print_cmd(cmd, PROMPT_DRYRUN)
                self._transition(cmd, State.DONE)
                return b""
            # The backend simulates the run itself, which needs no elevation.
            cmd = cmd.flags(strategy.dry_run.flags).with_privilege(False)

        self._transition(cmd, State.PROMPT_CHECK)
        prompted = False
        prompt = strategy.prompt
        if prompt.kind is PromptKind.NATIVE and cfg.no_confirm:
            cmd = cmd.flags(prompt.flags)
        elif prompt.kind is PromptKind.CUSTOM and not cfg.no_confirm and not self.context.confirm_all:
            print_cmd(cmd, PROMPT_PENDING)
            answer = self.prompter.ask()
            if answer is Answer.NO:
                raise PromptCanceled(cmd)
            if answer is Answer.ALL:
                self.context.set_confirm_all()
            prompted = True

        self._transition(cmd, State.RUNNING)
        if mode is Mode.CHECK_ALL and not prompted:
            print_cmd(cmd, PROMPT_RUN)
        output = self._spawn(cmd, mode)

        self._transition(cmd, State.CLEANUP_CHECK)
        op = strategy.no_cache.cleanup_op
        if cfg.no_cache and op and cleanup is not None:
            _logger.debug(f"Cleaning cache with `{op}` after `{cmd}`")
            # The cleanup command runs through execute() and walks its own states.
            outer = self.state
            try:
                cleanup(op)
            finally:
                self.state = outer

        self._transition(cmd, State.DONE)
        return output

    def _spawn(self, cmd: Cmd, mode: Mode) -> bytes:
        argv = cmd.argv()
        stdout = None
        stderr = None
        if mode is Mode.CAPTURE:
            stdout = subprocess.PIPE
        elif mode is Mode.MUTE:
            stdout = subprocess.DEVNULL
            stderr = subprocess.DEVNULL

        try:
            proc = subprocess.run(argv, stdout=stdout, stderr=stderr, check=False)
        except OSError as e:
            self.context.record_exit(SPAWN_FAILURE_CODE)
            raise ProcessSpawnFailure(cmd, self.pm_name, e.strerror or str(e)) from e

        self.context.record_exit(proc.returncode)
        if proc.returncode != 0:
            raise ProcessExitFailure(cmd, proc.returncode, self.pm_name)
        if mode is Mode.CAPTURE:
            return proc.stdout or b""
        return b""


def decode_output(cmd: Cmd, raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidOutputEncoding(cmd) from e


def grep(text: str, patterns: Iterable[str]) -> List[str]:
    """Lines of ``text`` containing every pattern (case-sensitive substring match)."""
    patterns = list(patterns)
    return [line for line in text.splitlines() if all(p in line for p in patterns)]


def grep_print(text: str, patterns: Iterable[str]) -> None:
    patterns = list(patterns)
    for line in grep(text, patterns):
        print(highlight_matches(line, patterns))
