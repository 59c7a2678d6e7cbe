import subprocess
from unittest import mock

import pytest

from pacwrap.config import Config
from pacwrap.context import InvocationContext
from pacwrap.executor import Executor
from pacwrap.prompter import Prompter


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Never touch the real ~/.config during tests."""
    path = tmp_path / "pacwrap.conf"
    monkeypatch.setenv("PACWRAP_CONFIG", str(path))
    return path


@pytest.fixture(autouse=True)
def as_root():
    """Render commands without the sudo prefix unless a test asks for it."""
    with mock.patch("pacwrap.command.is_root", return_value=True):
        yield


class FakeRun:
    """Stand-in for subprocess.run that records argv and replays exit codes."""

    def __init__(self):
        self.calls = []
        self.codes = {}
        self.stdout = {}

    def __call__(self, argv, stdout=None, stderr=None, check=False):
        argv = list(argv)
        self.calls.append(argv)
        key = tuple(argv)
        return subprocess.CompletedProcess(argv, self.codes.get(key, 0), stdout=self.stdout.get(key, b""))

    def fail(self, argv, code=1):
        self.codes[tuple(argv)] = code

    def output(self, argv, data: bytes):
        self.stdout[tuple(argv)] = data


@pytest.fixture
def fake_run():
    runner = FakeRun()
    with mock.patch("pacwrap.executor.subprocess.run", side_effect=runner) as patched:
        runner.mock = patched
        yield runner


def _make_executor(config=None, answers=(), pm_name="test"):
    answers = list(answers)
    reader = mock.Mock(side_effect=answers)
    executor = Executor(
        config or Config(),
        context=InvocationContext(),
        prompter=Prompter(reader=reader),
        pm_name=pm_name,
    )
    executor.reader = reader
    return executor


@pytest.fixture
def make_executor():
    """Build an Executor whose prompter replays the given answers."""
    return _make_executor
