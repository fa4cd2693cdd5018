import sys

from grade_calculator.main import main

sys.exit(main())
