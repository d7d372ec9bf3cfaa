"""Application constants."""

from fitmaster.core.enums import ExerciseType

# Exercise definition limits
MIN_SETS = 1
MAX_SETS = 10
MIN_REPS = 1
MAX_REPS = 100

# Workout generator: share of a muscle group's slots given to each priority tier
# (main, then auxiliary); isolation fills the rest.
PRIORITY_QUOTA_FRACTION = 0.4
PRIORITY_TIERS = (ExerciseType.MAIN, ExerciseType.AUXILIARY)

# Rest timer
TIMER_TICK_SECONDS = 1.0
REST_FINISHED_TITLE = "Rest is over!"
REST_FINISHED_BODY = "Ready for the next set?"

# Stats
RECENT_WORKOUTS_DAYS = 7
