"""Domain constants for the 90/180-day rule."""

MAX_STAY_DAYS = 90
WINDOW_DAYS = 180

SAFE_SEARCH_HORIZON_DAYS = 365

LOW_REMAINING_DAYS_THRESHOLD = 10
PLAN_DEPARTURE_THRESHOLD_DAYS = 30
COMFORTABLE_REMAINING_DAYS = 60

NON_SCHENGEN_MAX_STAY_DAYS = 365

# Destination used when only the arithmetic of a Schengen stay matters.
REPRESENTATIVE_SCHENGEN_COUNTRY = "Germany"
