from unittest import mock

import pytest

from pacwrap import cli
from pacwrap.command import Cmd
from pacwrap.errors import BackendUnsupportedOperation, ProcessExitFailure, PromptCanceled


def test_split_extra_flags():
    args, extra = cli.split_extra_flags(["-S", "docker", "--", "--proxy=localhost:1234", "--"])
    assert args == ["-S", "docker"]
    assert extra == ["--proxy=localhost:1234", "--"]


def test_split_without_separator():
    assert cli.split_extra_flags(["-Q"]) == (["-Q"], [])


@pytest.mark.parametrize(
    "argv",
    [
        ["-Syu"],
        ["-Suy"],
        ["-S", "-y", "-u"],
        ["--sync", "--refresh", "--sysupgrade"],
    ],
)
def test_parse_syu(argv):
    _, request = cli.parse_request(argv)
    assert request.operation == "S"
    assert request.flags == {"u": 1, "y": 1}
    assert request.keywords == []


def test_parse_counters():
    _, request = cli.parse_request(["-Sccc"])
    assert request.flags == {"c": 3}


def test_parse_keywords_and_global_flags():
    args, request = cli.parse_request(["-S", "--dryrun", "--yes", "docker"])
    assert args.dry_run
    assert args.no_confirm
    assert request.keywords == ["docker"]


def test_parse_using_and_extra_flags():
    args, request = cli.parse_request(["--pm", "mockpm", "-Si", "--yes", "docker", "--", "--proxy=localhost:1234"])
    assert args.using == "mockpm"
    assert request.flags == {"i": 1}
    assert request.keywords == ["docker"]
    assert request.extra_flags == ["--proxy=localhost:1234"]


def test_parse_requires_operation():
    with pytest.raises(SystemExit):
        cli.parse_request(["curl"])


def test_parse_rejects_two_operations():
    with pytest.raises(SystemExit):
        cli.parse_request(["-S", "-Q"])


@pytest.mark.parametrize("op", ["-R", "-S", "-U"])
def test_parse_print_is_the_p_flag(op):
    _, request = cli.parse_request([op, "--print", "curl"])
    assert request.flags == {"p": 1}


def test_parse_query_file_flag():
    _, request = cli.parse_request(["-Q", "--file", "curl.deb"])
    assert request.flags == {"p": 1}


def test_parse_rejects_print_with_query(capsys):
    with pytest.raises(SystemExit):
        cli.parse_request(["-Q", "--print", "curl"])
    assert "--print" in capsys.readouterr().err


@mock.patch("pacwrap.cli.dispatch", return_value=0)
def test_main_merges_config(mock_dispatch, isolated_config):
    isolated_config.write_text("[general]\nneeded = true\ndefault_pm = apt\n")
    assert cli.main(["-Sw", "--using", "brew", "--yes", "curl", "wget"]) == 0
    request, config = mock_dispatch.call_args[0]
    assert request.keywords == ["curl", "wget"]
    assert config.default_pm == "brew"
    assert config.needed and config.no_confirm


def test_main_unrecognized_operation(fake_run, capsys):
    assert cli.main(["-Qw"]) == 2
    assert fake_run.calls == []
    assert "Invalid flag" in capsys.readouterr().err


@mock.patch("pacwrap.cli.dispatch", side_effect=ProcessExitFailure(Cmd.new(["apt", "update"]), 100, "apt"))
def test_main_exit_failure_propagates_code(mock_dispatch, capsys):
    assert cli.main(["-Sy"]) == 100
    err = capsys.readouterr().err
    assert "apt update" in err
    assert "[apt]" in err


@mock.patch("pacwrap.cli.dispatch", side_effect=PromptCanceled(Cmd.new(["brew", "uninstall", "wget"])))
def test_main_prompt_canceled_exits_cleanly(mock_dispatch, capsys):
    assert cli.main(["-R", "wget"]) == 0
    assert "Canceled" in capsys.readouterr().out


@mock.patch("pacwrap.cli.dispatch", side_effect=BackendUnsupportedOperation("brew", "qk"))
def test_main_unsupported_operation(mock_dispatch, capsys):
    assert cli.main(["-Qk"]) == 1
    err = capsys.readouterr().err
    assert "qk" in err and "brew" in err


def test_main_config_load_failure(isolated_config, capsys):
    isolated_config.write_text("[general]\nno_cache = sometimes\n")
    with mock.patch("pacwrap.cli.dispatch") as mock_dispatch:
        assert cli.main(["-Sy"]) == 1
    mock_dispatch.assert_not_called()
    assert "Failed to load config" in capsys.readouterr().err


def test_main_unreadable_config_runs_nothing(isolated_config, fake_run, capsys):
    isolated_config.mkdir()
    assert cli.main(["--pm", "apt", "-Sy"]) == 1
    assert fake_run.calls == []
    assert "Failed to load config" in capsys.readouterr().err


def test_main_dry_run_end_to_end(fake_run, capsys):
    assert cli.main(["--pm", "apt", "-Syu", "--dry-run"]) == 0
    assert fake_run.calls == []
    out = capsys.readouterr().out
    assert "apt update" in out
    assert "apt upgrade" in out


def test_main_compat_table(capsys):
    assert cli.main(["--compat-table"]) == 0
    assert "apt" in capsys.readouterr().out


@mock.patch("pacwrap.cli.dispatch", side_effect=KeyboardInterrupt)
def test_main_keyboard_interrupt(mock_dispatch):
    assert cli.main(["-Sy"]) == 130
