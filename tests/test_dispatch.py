from unittest import mock

import pytest

from pacwrap.command import Cmd
from pacwrap.config import Config
from pacwrap.context import InvocationContext
from pacwrap.dispatch import FLAG_TABLES, Request, canonicalize, dispatch
from pacwrap.errors import ProcessExitFailure, UnrecognizedOperation
from pacwrap.executor import Executor
from pacwrap.pm import OPERATIONS, Brew, PackageManager


class TwoStep(PackageManager):
    """Backend whose `suy` refreshes, then upgrades."""

    name = "twostep"

    def sy(self, kws, flags):
        self.run(Cmd.new(["pm", "refresh"]).flags(flags))

    def su(self, kws, flags):
        self.run(Cmd.new(["pm", "upgrade"]).kws(kws).flags(flags))

    def suy(self, kws, flags):
        self.sy([], flags)
        self.su(kws, flags)


def factory_for(cls):
    def factory(config):
        return cls(config, Executor(config, context=InvocationContext(), pm_name=cls.name))

    return factory


@pytest.mark.parametrize(
    "flags",
    [
        {"y": 1, "u": 1},
        {"u": 1, "y": 1},
    ],
)
def test_canonicalization_is_order_independent(flags):
    ident, _ = canonicalize("S", flags, Config())
    assert ident == "suy"


@pytest.mark.parametrize(
    "op, flags, expected",
    [
        ("Q", {}, "q"),
        ("Q", {"i": 1}, "qi"),
        ("R", {"s": 1, "n": 1}, "rns"),
        ("R", {"s": 2}, "rss"),
        ("S", {"c": 3}, "sccc"),
        ("S", {"i": 2}, "sii"),
        ("S", {"w": 1}, "sw"),
        ("U", {}, "u"),
    ],
)
def test_canonical_identifiers(op, flags, expected):
    assert canonicalize(op, flags, Config())[0] == expected


def test_letter_flags_contribute_once():
    # -Qll is still `ql`: plain flags have set semantics.
    assert canonicalize("Q", {"l": 2}, Config())[0] == "ql"


def test_identifier_suffixes_are_sorted():
    assert len(OPERATIONS) == 30
    for ident in OPERATIONS:
        assert list(ident[1:]) == sorted(ident[1:])


def test_every_identifier_is_reachable_from_the_flag_tables():
    for ident in OPERATIONS:
        op = ident[0].upper()
        flags = {}
        for letter in ident[1:]:
            flags[letter] = flags.get(letter, 0) + 1
        assert canonicalize(op, flags, Config())[0] == ident


@pytest.mark.parametrize("op", ["R", "S", "U"])
def test_print_flag_aliases_dry_run(op):
    ident, cfg = canonicalize(op, {"p": 1}, Config())
    assert ident == op.lower()
    assert cfg.dry_run is True


def test_query_print_flag_is_a_letter():
    ident, cfg = canonicalize("Q", {"p": 1}, Config())
    assert ident == "qp"
    assert cfg.dry_run is False


@pytest.mark.parametrize(
    "op, flags",
    [
        ("Q", {"w": 1}),
        ("S", {"c": 4}),
        ("S", {"s": 1, "y": 1}),
        ("U", {"s": 1}),
        ("X", {}),
    ],
)
def test_unrecognized_operation(op, flags):
    with pytest.raises(UnrecognizedOperation):
        canonicalize(op, flags, Config())


def test_unrecognized_operation_spawns_nothing(fake_run):
    factory = mock.Mock()
    with pytest.raises(UnrecognizedOperation):
        dispatch(Request("Q", {"y": 1}), Config(), factory=factory)
    factory.assert_not_called()
    assert fake_run.calls == []


def test_dispatch_syu_runs_refresh_then_upgrade(fake_run):
    code = dispatch(Request("S", {"y": 1, "u": 1}), Config(), factory=factory_for(TwoStep))
    assert code == 0
    assert fake_run.calls == [["pm", "refresh"], ["pm", "upgrade"]]


def test_dispatch_syu_stops_after_failed_refresh(fake_run):
    fake_run.fail(["pm", "refresh"], code=1)
    with pytest.raises(ProcessExitFailure) as exc:
        dispatch(Request("S", {"y": 1, "u": 1}), Config(), factory=factory_for(TwoStep))
    assert exc.value.code == 1
    assert fake_run.calls == [["pm", "refresh"]]


def test_dispatch_sw_appends_keywords_in_order(fake_run):
    request = Request("S", {"w": 1}, keywords=["curl", "wget"])
    dispatch(request, Config(no_confirm=True), factory=factory_for(Brew))
    assert fake_run.calls == [["brew", "fetch", "curl", "wget"]]


def test_dispatch_passes_extra_flags_last(fake_run):
    request = Request("S", {"u": 1}, keywords=["vim"], extra_flags=["--verbose"])
    dispatch(request, Config(), factory=factory_for(TwoStep))
    assert fake_run.calls == [["pm", "upgrade", "vim", "--verbose"]]


def test_dispatch_print_flag_prevents_spawning(fake_run):
    dispatch(Request("S", {"y": 1, "u": 1, "p": 1}), Config(), factory=factory_for(TwoStep))
    assert fake_run.calls == []


def test_dispatch_returns_last_exit_code(fake_run):
    fake_run.fail(["pm", "upgrade"], code=3)
    pm = factory_for(TwoStep)(Config())
    with pytest.raises(ProcessExitFailure):
        dispatch(Request("S", {"u": 1}), Config(), factory=lambda cfg: pm)
    assert pm.code() == 3


def test_flag_tables_cover_the_four_operations():
    assert set(FLAG_TABLES) == {"Q", "R", "S", "U"}
