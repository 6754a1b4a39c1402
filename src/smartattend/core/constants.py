"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_NAMESPACE = "smartattend"

AT_RISK_THRESHOLD = 75.0
WARNING_THRESHOLD = 60.0

DEFAULT_RANGE_DAYS = 30
TREND_TAIL_SESSIONS = 7

ROSTER_IMPORT_MAX_CHARS = 15000

INSIGHT_FALLBACK_TEXT = "Could not generate AI insights at this time."
INSIGHT_TIMEOUT_SECONDS = 20
UNKNOWN_BATCH_NAME = "Unknown Batch"

DEMO_BATCHES = (
    ("Computer Science 2024 - A", "Morning Batch"),
    ("Business Admin 2024 - B", "Evening Batch"),
)
