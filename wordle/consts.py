import datetime
import os

WORD_LENGTH = 5
MAX_GUESSES = 6

# 3^5 possible feedback patterns, position 0 is the least significant digit
N_PATTERNS = 243
WIN_PATTERN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81

DEFAULT_OPENING = "soare"
DEFAULT_TITLE = "Wordle"

# Day 0 of the daily puzzle numbering
FIRST_DAY = datetime.date(2021, 6, 19)

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
SOLUTIONS_FILE = os.path.join(DATA_DIR, "solutions.txt")
ACCEPTABLE_FILE = os.path.join(DATA_DIR, "acceptable.txt")
