"""
Fixed constants of the 3PL ability scale.
"""

# Practical range of test-taker ability on the logistic scale
ABILITY_MIN = -3.0
ABILITY_MAX = 3.0

# Item parameter defaults used when a response does not carry its own
DEFAULT_DISCRIMINATION = 1.0
DEFAULT_GUESSING = 0.25

# Difficulty label -> IRT difficulty (b)
EASY_DIFFICULTY = -1.0
MEDIUM_DIFFICULTY = 0.0
HARD_DIFFICULTY = 1.0

# Normalized ability reported for a session with no answered items
NEUTRAL_NORMALIZED_ABILITY = 0.5

# Normalized ability cut-offs for choosing the next item difficulty
HARD_TARGET_THRESHOLD = 0.7
MEDIUM_TARGET_THRESHOLD = 0.4
