from grade_calculator.backend_logic import (
    EmptyGradeBookError,
    GradeBook,
    GradeInputError,
    InvalidChoiceError,
    InvalidGradeError,
    average,
    letter_grade,
)
from grade_calculator.session import GradeCalculator

__version__ = "1.0.0"
