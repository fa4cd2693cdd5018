import pytest

from grade_calculator.backend_logic import GradeBook
from grade_calculator.io_prompts import Presenter
from grade_calculator.session import GradeCalculator


class ScriptedPresenter(Presenter):
    """Plays back canned answers and records everything shown."""

    def __init__(self, menu=(), grades=(), yes_no=()):
        self.menu = list(menu)
        self.grades = list(grades)
        self.yes_no = list(yes_no)
        self.infos = []
        self.errors = []
        self.closed = False

    def ask_menu_choice(self):
        # Running out of answers behaves like Cancel
        return self.menu.pop(0) if self.menu else None

    def ask_grade(self):
        return self.grades.pop(0) if self.grades else None

    def ask_yes_no(self, title, message):
        return self.yes_no.pop(0) if self.yes_no else False

    def show_info(self, title, message):
        self.infos.append((title, message))

    def show_error(self, title, message):
        self.errors.append((title, message))

    def close(self):
        self.closed = True


def test_cancel_on_menu_is_exit():
    presenter = ScriptedPresenter(menu=[None])
    book = GradeCalculator(presenter).run()

    assert book.is_empty()
    assert presenter.infos[0][0] == "Welcome"
    assert presenter.infos[-1] == ("Goodbye", "Thank you for using Grade Calculator!")
    assert presenter.closed


def test_cancel_on_grade_entry_returns_to_menu():
    presenter = ScriptedPresenter(menu=["1", "2", "4"], grades=["80", None], yes_no=[True])
    book = GradeCalculator(presenter).run()

    assert book.grades == (80.0,)
    assert ("Success", "Grade 80 added.") in presenter.infos
    assert ("Average", "Current Average: 80%") in presenter.infos


def test_declining_continue_stops_grade_entry():
    presenter = ScriptedPresenter(
        menu=["1", "4"], grades=["80", "90", "100"], yes_no=[True, False]
    )
    calculator = GradeCalculator(presenter)
    book = calculator.run()

    # The third grade was never asked for
    assert book.grades == (80.0, 90.0)
    assert presenter.grades == ["100"]


def test_add_grades_returns_count_and_skips_invalid():
    presenter = ScriptedPresenter(grades=["x", "95", "200", "85"], yes_no=[True, False])
    calculator = GradeCalculator(presenter)

    assert calculator.add_grades() == 2
    assert calculator.book.grades == (95.0, 85.0)
    assert presenter.errors == [
        ("Invalid Input", "Please enter a valid number (e.g., 88 or 92.5)."),
        ("Invalid Grade", "Grade must be between 0 and 100."),
    ]


def test_empty_book_views_are_informational():
    presenter = ScriptedPresenter()
    calculator = GradeCalculator(presenter)

    calculator.view_average()
    calculator.view_letter_grade()

    assert presenter.infos == [
        ("Average", "No grades entered yet."),
        ("Letter Grade", "No grades entered yet."),
    ]
    assert presenter.errors == []


def test_goodbye_message_with_statistics():
    calculator = GradeCalculator(ScriptedPresenter(), book=GradeBook([80, 90, 100]))

    assert calculator.goodbye_message() == (
        "Thank you for using Grade Calculator!\n\n"
        "Final Statistics:\n"
        "Total Grades: 3\n"
        "Final Average: 90%\n"
        "Letter Grade: A"
    )


def test_each_session_owns_its_grade_book():
    first = GradeCalculator(ScriptedPresenter(menu=["1", "4"], grades=["70"])).run()
    second = GradeCalculator(ScriptedPresenter(menu=["4"])).run()

    assert first.grades == (70.0,)
    assert second.is_empty()


def test_keyboard_interrupt_ends_session_with_goodbye():
    class InterruptingPresenter(ScriptedPresenter):
        def ask_menu_choice(self):
            raise KeyboardInterrupt

    presenter = InterruptingPresenter()
    book = GradeCalculator(presenter, book=GradeBook([65])).run()

    assert len(book) == 1
    assert presenter.infos[-1][0] == "Goodbye"
    assert "Letter Grade: D" in presenter.infos[-1][1]
    assert presenter.closed


def test_presenter_is_closed_when_something_fails():
    class BrokenPresenter(ScriptedPresenter):
        def show_welcome(self):
            raise RuntimeError("display went away")

    presenter = BrokenPresenter()
    with pytest.raises(RuntimeError):
        GradeCalculator(presenter).run()
    assert presenter.closed
