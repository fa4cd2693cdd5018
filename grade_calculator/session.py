import logging
from typing import Optional

from grade_calculator.backend_logic import (
    GradeBook,
    GradeInputError,
    format_number,
    parse_grade,
    parse_menu_choice,
)
from grade_calculator.config import (
    AVERAGE_TITLE,
    CHOICE_ADD,
    CHOICE_AVERAGE,
    CHOICE_EXIT,
    CHOICE_LETTER,
    CONTINUE_TEXT,
    CONTINUE_TITLE,
    GOODBYE_TEXT,
    GOODBYE_TITLE,
    LETTER_TITLE,
    NO_GRADES_TEXT,
    SUCCESS_TITLE,
)
from grade_calculator.io_prompts import Presenter

logger = logging.getLogger(__name__)


class GradeCalculator:
    """
    Menu loop for one run. Owns the grade book and talks to the user only
    through the presenter.

    MENU -> ADD | VIEW_AVERAGE | VIEW_LETTER -> MENU
    MENU -> EXIT (goodbye summary, then done)
    """

    def __init__(self, presenter: Presenter, book: Optional[GradeBook] = None):
        self.presenter = presenter
        self.book = book if book is not None else GradeBook()
        self._actions = {
            CHOICE_ADD: self.add_grades,
            CHOICE_AVERAGE: self.view_average,
            CHOICE_LETTER: self.view_letter_grade,
        }

    def run(self) -> GradeBook:
        logger.info("Session started with %s", type(self.presenter).__name__)
        try:
            self.presenter.show_welcome()
            choice = None
            while choice != CHOICE_EXIT:
                choice = self.read_menu_choice()
                self.process_choice(choice)
            self.show_goodbye()
        except KeyboardInterrupt:
            logger.info("Interrupted; ending session")
            self.show_goodbye()
        finally:
            self.presenter.close()
        logger.info("Session ended with %d grade(s)", len(self.book))
        return self.book

    # ------------------------
    # Menu
    # ------------------------
    def read_menu_choice(self) -> int:
        while True:
            text = self.presenter.ask_menu_choice()
            if text is None:
                # Cancel counts as Exit
                return CHOICE_EXIT
            try:
                return parse_menu_choice(text)
            except GradeInputError as e:
                logger.debug("Rejected menu input %r: %s", text, e)
                self.presenter.show_error(e.title, str(e))

    def process_choice(self, choice: int) -> None:
        action = self._actions.get(choice)
        if action is not None:
            action()

    # ------------------------
    # Actions
    # ------------------------
    def add_grades(self) -> int:
        """Prompt until the user stops. Returns how many grades were added."""
        added = 0
        while True:
            text = self.presenter.ask_grade()
            if text is None:
                return added

            try:
                grade = self.book.add(parse_grade(text))
            except GradeInputError as e:
                self.presenter.show_error(e.title, str(e))
                continue

            added += 1
            self.presenter.show_info(SUCCESS_TITLE, f"Grade {format_number(grade)} added.")
            if not self.presenter.ask_yes_no(CONTINUE_TITLE, CONTINUE_TEXT):
                return added

    def view_average(self) -> None:
        if self.book.is_empty():
            self.presenter.show_info(AVERAGE_TITLE, NO_GRADES_TEXT)
            return
        avg = self.book.average()
        self.presenter.show_info(AVERAGE_TITLE, f"Current Average: {format_number(avg)}%")

    def view_letter_grade(self) -> None:
        if self.book.is_empty():
            self.presenter.show_info(LETTER_TITLE, NO_GRADES_TEXT)
            return
        avg = self.book.average()
        letter = self.book.letter_grade()
        self.presenter.show_info(
            LETTER_TITLE,
            f"Average: {format_number(avg)}%\nLetter Grade: {letter}",
        )

    def goodbye_message(self) -> str:
        message = GOODBYE_TEXT
        summary = self.book.summary()
        if summary["count"]:
            message += (
                "\n\nFinal Statistics:\n"
                f"Total Grades: {summary['count']}\n"
                f"Final Average: {format_number(summary['average'])}%\n"
                f"Letter Grade: {summary['letter']}"
            )
        return message

    def show_goodbye(self) -> None:
        self.presenter.show_info(GOODBYE_TITLE, self.goodbye_message())
