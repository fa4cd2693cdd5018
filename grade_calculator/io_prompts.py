import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from grade_calculator.backend_logic import menu_lines
from grade_calculator.config import (
    GRADE_PROMPT_CONSOLE,
    MENU_PROMPT,
    NO_WORDS,
    STOP_WORDS,
    WELCOME_TEXT,
    WELCOME_TITLE,
    YES_WORDS,
)

logger = logging.getLogger(__name__)

PRESENTER_MODES = ("auto", "gui", "console")


class DisplayUnavailableError(RuntimeError):
    pass


# ------------------------
# Presenter interface
# ------------------------
class Presenter(ABC):
    """
    Everything the calculator shows or asks goes through a presenter.

    The ask_* methods hand back the raw text the user typed. None means
    the user cancelled, asked to stop, or input ran out.
    """

    def show_welcome(self) -> None:
        self.show_info(WELCOME_TITLE, WELCOME_TEXT)

    @abstractmethod
    def ask_menu_choice(self) -> Optional[str]:
        ...

    @abstractmethod
    def ask_grade(self) -> Optional[str]:
        ...

    @abstractmethod
    def ask_yes_no(self, title: str, message: str) -> bool:
        ...

    @abstractmethod
    def show_info(self, title: str, message: str) -> None:
        ...

    @abstractmethod
    def show_error(self, title: str, message: str) -> None:
        ...

    def close(self) -> None:
        pass


# ------------------------
# Console text
# ------------------------
class ConsolePresenter(Presenter):
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read(self, prompt: str) -> Optional[str]:
        self._write(prompt)
        line = self.stdin.readline()
        if line == "":
            # EOF
            self._write("\n")
            return None
        return line.rstrip("\r\n")

    def ask_menu_choice(self) -> Optional[str]:
        self._write("\nMenu\n" + "\n".join(menu_lines()) + "\n")
        return self._read(MENU_PROMPT + " ")

    def ask_grade(self) -> Optional[str]:
        text = self._read(GRADE_PROMPT_CONSOLE + " ")
        if text is None or text.strip().lower() in STOP_WORDS:
            return None
        return text

    def ask_yes_no(self, title: str, message: str) -> bool:
        while True:
            answer = self._read(f"{message} [y/n]: ")
            if answer is None:
                return False
            answer = answer.strip().lower()
            if answer in YES_WORDS:
                return True
            if answer in NO_WORDS:
                return False
            self._write("Please answer y or n.\n")

    def show_info(self, title: str, message: str) -> None:
        self._write(f"\n== {title} ==\n{message}\n")

    def show_error(self, title: str, message: str) -> None:
        self._write(f"[{title}] {message}\n")


# ------------------------
# Selection
# ------------------------
def select_presenter(mode: str = "auto") -> Presenter:
    """
    auto:    dialogs when a display is available, console otherwise
    gui:     dialogs or DisplayUnavailableError
    console: console text
    """
    if mode not in PRESENTER_MODES:
        raise ValueError(f"mode must be one of {PRESENTER_MODES} (got {mode!r})")

    if mode == "console":
        logger.info("Using console mode")
        return ConsolePresenter()

    try:
        # tkinter is optional in some Python builds
        from grade_calculator.io_dialogs import DialogPresenter
    except ImportError as e:
        reason = DisplayUnavailableError(f"tkinter is not available: {e}")
    else:
        try:
            presenter = DialogPresenter()
        except DisplayUnavailableError as e:
            reason = e
        else:
            logger.info("Using dialog mode")
            return presenter

    if mode == "gui":
        raise reason

    logger.info("No display available (%s); using console mode", reason)
    return ConsolePresenter()
