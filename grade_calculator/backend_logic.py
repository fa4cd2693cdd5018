import logging
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from grade_calculator.config import (
    FAILING_LETTER,
    GRADE_MAX,
    GRADE_MIN,
    LETTER_BANDS,
    MENU_OPTIONS,
)

logger = logging.getLogger(__name__)


# ------------------------
# Errors
# ------------------------
class GradeInputError(ValueError):
    """Bad user input. `title` is the heading shown with the message."""

    def __init__(self, message: str, title: str = "Invalid Input"):
        super().__init__(message)
        self.title = title


class InvalidGradeError(GradeInputError):
    pass


class InvalidChoiceError(GradeInputError):
    pass


class EmptyGradeBookError(ValueError):
    pass


# ------------------------
# Core logic
# ------------------------
def format_number(x: float) -> str:
    """
    Two decimals at most, trailing zeros dropped:
    90.0 -> "90", 92.5 -> "92.5", 88.333 -> "88.33"
    """
    rounded = Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)
    text = format(rounded.normalize(), "f")
    return "0" if text == "-0" else text


def average(grades: Sequence[float]) -> float:
    if len(grades) == 0:
        raise EmptyGradeBookError("Cannot average an empty list of grades.")
    return float(np.mean(np.asarray(grades, dtype=float)))


def letter_grade(avg: float) -> str:
    for lower_bound, letter in LETTER_BANDS:
        if avg >= lower_bound:
            return letter
    return FAILING_LETTER


def grade_summary(grades: Sequence[float]) -> Dict[str, Optional[object]]:
    """
    count:   number of grades recorded
    average: mean of the grades, None when there are none
    letter:  letter grade for the mean, None when there are none
    """
    if len(grades) == 0:
        return {"count": 0, "average": None, "letter": None}

    avg = average(grades)
    return {
        "count": len(grades),
        "average": avg,
        "letter": letter_grade(avg),
    }


# ------------------------
# Input parsing
# ------------------------
def _out_of_range() -> InvalidGradeError:
    return InvalidGradeError(
        f"Grade must be between {format_number(GRADE_MIN)} and {format_number(GRADE_MAX)}.",
        title="Invalid Grade",
    )


def parse_grade(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        raise InvalidGradeError(
            "Please enter a valid number (e.g., 88 or 92.5).", title="Invalid Input"
        ) from None

    # NaN fails both comparisons, infinities fail one
    if not (GRADE_MIN <= value <= GRADE_MAX):
        raise _out_of_range()
    return value


def parse_menu_choice(text: str) -> int:
    try:
        choice = int(text.strip())
    except ValueError:
        raise InvalidChoiceError("Please enter a valid number.", title="Invalid Input") from None

    if choice not in MENU_OPTIONS:
        lowest, highest = min(MENU_OPTIONS), max(MENU_OPTIONS)
        raise InvalidChoiceError(
            f"Please enter a number between {lowest} and {highest}.",
            title="Invalid Choice",
        )
    return choice


def menu_lines() -> List[str]:
    return [f"{number}. {label}" for number, label in sorted(MENU_OPTIONS.items())]


# ------------------------
# Grade store
# ------------------------
class GradeBook:
    """Append-only list of grades for one run of the calculator."""

    def __init__(self, grades: Iterable[float] = ()):
        self._grades: List[float] = []
        for grade in grades:
            self.add(grade)

    def add(self, value: float) -> float:
        value = float(value)
        if not (GRADE_MIN <= value <= GRADE_MAX):
            logger.debug("Rejected grade %r", value)
            raise _out_of_range()
        self._grades.append(value)
        logger.debug("Added grade %s (now %d)", value, len(self._grades))
        return value

    def is_empty(self) -> bool:
        return not self._grades

    @property
    def grades(self) -> Tuple[float, ...]:
        return tuple(self._grades)

    def __len__(self) -> int:
        return len(self._grades)

    def average(self) -> float:
        return average(self._grades)

    def letter_grade(self) -> str:
        return letter_grade(self.average())

    def summary(self) -> Dict[str, Optional[object]]:
        return grade_summary(self._grades)
