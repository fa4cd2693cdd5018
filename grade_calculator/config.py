from typing import Dict, List, Tuple

# ------------------------
# Grades
# ------------------------
GRADE_MIN = 0.0
GRADE_MAX = 100.0

# (lower bound inclusive, letter), highest band first
LETTER_BANDS: List[Tuple[float, str]] = [
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
]
FAILING_LETTER = "F"

# ------------------------
# Menu
# ------------------------
CHOICE_ADD = 1
CHOICE_AVERAGE = 2
CHOICE_LETTER = 3
CHOICE_EXIT = 4

MENU_OPTIONS: Dict[int, str] = {
    CHOICE_ADD: "Add a Grade",
    CHOICE_AVERAGE: "View Current Average",
    CHOICE_LETTER: "View Letter Grade",
    CHOICE_EXIT: "Exit",
}

STOP_WORDS = {"stop"}
YES_WORDS = {"y", "yes"}
NO_WORDS = {"n", "no"}

# ------------------------
# Messages
# ------------------------
APP_TITLE = "Grade Calculator"

WELCOME_TITLE = "Welcome"
WELCOME_TEXT = (
    "Grade Calculator\n\n"
    "Track grades and see your running average & letter grade. "
    "Add as many grades as you like."
)

MENU_PROMPT = "Enter a number (1-4):"

GRADE_PROMPT_DIALOG = "Enter a grade (0-100). Click Cancel to stop."
GRADE_PROMPT_CONSOLE = "Enter a grade (0-100), or 'stop' to finish:"
ADD_GRADE_TITLE = "Add Grade"

NO_GRADES_TEXT = "No grades entered yet."
AVERAGE_TITLE = "Average"
LETTER_TITLE = "Letter Grade"

CONTINUE_TITLE = "Continue?"
CONTINUE_TEXT = "Add another grade?"
SUCCESS_TITLE = "Success"

GOODBYE_TITLE = "Goodbye"
GOODBYE_TEXT = "Thank you for using Grade Calculator!"

# ------------------------
# Theme (dialog mode)
# ------------------------
THEME: Dict[str, str] = {
    "background": "#0B1220",   # deep slate
    "panel": "#101827",
    "foreground": "#E5E7EB",   # light gray text
    "accent": "#19A7A1",       # teal
    "accent_dark": "#0F766E",
    "button": "#162235",
    "entry_background": "#FFFFFF",
    "entry_foreground": "#000000",
}

FONT_FAMILY = "Segoe UI"
FONT_SIZE = 12
TITLE_FONT_SIZE = 14

BRAND_ICON_SIZE = 56
