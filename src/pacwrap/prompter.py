from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .logger import setup_logger
from .printer import print_question

_logger = setup_logger()


class Answer(Enum):
    YES = "yes"
    NO = "no"
    ALL = "all"


ANSWERS = {
    "y": Answer.YES,
    "yes": Answer.YES,
    "n": Answer.NO,
    "no": Answer.NO,
    "a": Answer.ALL,
    "all": Answer.ALL,
}


class Prompter:
    """Blocking yes/no/all question on standard input."""

    def __init__(self, reader: Optional[Callable[[], str]] = None) -> None:
        self._reader = reader or input

    def ask(self, question: str = "Proceed", options: str = "[Yes/all/no]") -> Answer:
        """
        Ask until one of ``y yes n no a all`` (any case) is given.
        End of input counts as ``no``.
        """
        while True:
            print_question(question, options)
            try:
                line = self._reader()
            except EOFError:
                print()
                _logger.debug("EOF while prompting; treating as 'no'")
                return Answer.NO
            answer = ANSWERS.get(line.strip().lower())
            if answer is not None:
                return answer
            _logger.debug(f"Unrecognized answer {line!r}, asking again")
