import logging
import tkinter as tk
from tkinter import messagebox, simpledialog
from typing import Optional

from grade_calculator.backend_logic import menu_lines
from grade_calculator.branding import make_brand_icon
from grade_calculator.config import (
    ADD_GRADE_TITLE,
    APP_TITLE,
    FONT_FAMILY,
    FONT_SIZE,
    GRADE_PROMPT_DIALOG,
    MENU_PROMPT,
    THEME,
    TITLE_FONT_SIZE,
)
from grade_calculator.io_prompts import DisplayUnavailableError, Presenter

logger = logging.getLogger(__name__)


# ------------------------
# Theme
# ------------------------
def apply_theme(root: tk.Misc) -> None:
    """Dark slate palette for every dialog opened from `root`."""
    base = (FONT_FAMILY, FONT_SIZE)
    bold = (FONT_FAMILY, FONT_SIZE, "bold")

    root.option_add("*Background", THEME["panel"])
    root.option_add("*Foreground", THEME["foreground"])
    root.option_add("*Font", base)
    root.option_add("*Dialog.msg.font", (FONT_FAMILY, TITLE_FONT_SIZE))

    root.option_add("*Button.Background", THEME["button"])
    root.option_add("*Button.Foreground", THEME["foreground"])
    root.option_add("*Button.Font", bold)
    root.option_add("*Button.activeBackground", THEME["accent"])
    root.option_add("*Button.highlightColor", THEME["accent"])

    # Text fields used by askstring
    root.option_add("*Entry.Background", THEME["entry_background"])
    root.option_add("*Entry.Foreground", THEME["entry_foreground"])
    root.option_add("*Entry.selectBackground", THEME["accent"])


# ------------------------
# Modal dialogs
# ------------------------
class DialogPresenter(Presenter):
    def __init__(self, root: Optional[tk.Misc] = None):
        if root is None:
            try:
                root = tk.Tk()
            except tk.TclError as e:
                raise DisplayUnavailableError(str(e)) from e
            root.withdraw()
            root.title(APP_TITLE)
            apply_theme(root)
            self.icon = make_brand_icon(root)
            root.iconphoto(True, self.icon)
        self.root = root

    def ask_menu_choice(self) -> Optional[str]:
        menu = "Menu\n\n" + "\n".join(menu_lines()) + "\n\n" + MENU_PROMPT
        return simpledialog.askstring(APP_TITLE, menu, parent=self.root)

    def ask_grade(self) -> Optional[str]:
        return simpledialog.askstring(ADD_GRADE_TITLE, GRADE_PROMPT_DIALOG, parent=self.root)

    def ask_yes_no(self, title: str, message: str) -> bool:
        return bool(messagebox.askyesno(title, message, parent=self.root))

    def show_info(self, title: str, message: str) -> None:
        messagebox.showinfo(title, message, parent=self.root)

    def show_error(self, title: str, message: str) -> None:
        messagebox.showerror(title, message, parent=self.root)

    def close(self) -> None:
        logger.debug("Destroying Tk root")
        self.root.destroy()
