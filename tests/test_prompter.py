from unittest import mock

import pytest

from pacwrap.prompter import Answer, Prompter


@pytest.mark.parametrize(
    "line, expected",
    [
        ("y", Answer.YES),
        ("Yes", Answer.YES),
        ("N", Answer.NO),
        ("no", Answer.NO),
        ("a", Answer.ALL),
        (" ALL ", Answer.ALL),
    ],
)
def test_accepted_answers(line, expected):
    assert Prompter(reader=mock.Mock(return_value=line)).ask() is expected


def test_unknown_answer_asks_again(capsys):
    reader = mock.Mock(side_effect=["sure", "yep", "n"])
    assert Prompter(reader=reader).ask() is Answer.NO
    assert reader.call_count == 3
    assert capsys.readouterr().out.count("Proceed") == 3


def test_end_of_input_is_no():
    assert Prompter(reader=mock.Mock(side_effect=EOFError)).ask() is Answer.NO


def test_reads_stdin_by_default(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda: "a")
    assert Prompter().ask() is Answer.ALL
