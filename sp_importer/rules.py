"""
Fixed matching and format rules.

These mirror the layout of the script dumps and translation spreadsheets
exactly; changing any of them changes which lines are considered equal.
"""

# Stripped from both sides before comparing. The first entry is the
# two-character escape used inside spreadsheet cells, not a newline.
FUZZY_STRIP_SYMBOLS = (
    "\\n",
    "\n",
    "。",
    "、",
    "…",
    "　",  # full-width space
    "～",
    "〜",
    " ",
    "「",
    "」",
)

# Similarity thresholds
MAX_LENGTH_DIFFERENCE = 5
DIVERGENCE_DIVISOR = 5  # up to 1/5 of the longer string may differ

# Script dump format
HEADER_MARKER = "#"
NAME_ANCHOR_PREFIX = "# ["
COMMENT_PREFIX = "# "
CHOICE_PREFIX = "Choice: "
LINE_BREAK_MARKER = "\\n"

# Spreadsheet format
CSV_DELIMITER = ";"
SENTINEL_ROW = ";;;"
IMPORT_COMMENT_PREFIX = "imported from "
SPREADSHEET_EXTENSIONS = (".csv", ".CSV")

REPORT_FILENAME = "import_report.txt"
