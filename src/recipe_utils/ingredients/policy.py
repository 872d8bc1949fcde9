"""Fixed matching and scaling policy."""

# --- Matching ---

EXACT_SCORE = 1.0
SUBSTRING_SCORE = 0.9
FUZZY_MATCH_THRESHOLD = 0.7

# Minimum recipe match percentage for the leftover scanner
LEFTOVER_MATCH_CUTOFF = 80

# --- Scaling ---

QUANTITY_DECIMALS = 2
FRACTION_TOLERANCE = 0.05

# Checked in this order; the first label within tolerance wins
FRACTION_SNAPS = (
    (0.25, "1/4"),
    (0.33, "1/3"),
    (0.5, "1/2"),
    (0.67, "2/3"),
    (0.75, "3/4"),
)

MIN_SERVINGS = 1
MAX_SERVINGS = 99
