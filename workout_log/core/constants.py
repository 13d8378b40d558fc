"""Application constants."""

# Field limits for a recorded set
EXERCISE_NAME_MIN_LENGTH = 2
EXERCISE_NAME_MAX_LENGTH = 100
REPS_MIN = 1
REPS_MAX = 1000
WEIGHT_MAX_KG = 1000.0

# Time-windowed views
RECENT_WINDOW_DAYS = 7
PERIOD_WEEK_DAYS = 7
PERIOD_MONTH_DAYS = 30
