import threading


class InvocationContext:
    """
    State shared by every command of a single invocation.

    ``confirm_all`` is written at most once (when the user answers "all")
    and read before every custom prompt. ``last_code`` is the exit status
    of the most recently executed command.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._confirm_all = False
        self._last_code = 0

    @property
    def confirm_all(self) -> bool:
        with self._lock:
            return self._confirm_all

    def set_confirm_all(self) -> None:
        with self._lock:
            self._confirm_all = True

    @property
    def last_code(self) -> int:
        with self._lock:
            return self._last_code

    def record_exit(self, code: int) -> None:
        with self._lock:
            self._last_code = code
