import sys

from grade_calculator.main import main

# ------------------------
# Grade Calculator (dialogs, or console text when there is no display)
# ------------------------

# To run:
# python app.py
# python app.py --mode console

if __name__ == "__main__":
    sys.exit(main())
