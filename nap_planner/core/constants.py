"""Schedule defaults, rounding rules, and display labels."""

# ── DEFAULT PARAMETERS ──────────────────────────────────────────────────────
# Values used when a query parameter is missing, empty, unparseable or zero.
# A falsy value (0) falls back too, so numNaps=0 from the URL yields 5 naps.
DEFAULT_WAKEUP = "06:20"
DEFAULT_NUM_NAPS = 5
DEFAULT_AVG_NAP_LENGTH_MINUTES = 40
DEFAULT_NEXT_WAKE_WINDOW_MINUTES = 90
DEFAULT_LAST_WAKE_WINDOW_MINUTES = 120

# Accepted wakeup formats, tried in order. <input type="time"> may send seconds.
WAKEUP_FORMATS = ("%H:%M", "%H:%M:%S")
WAKEUP_OUTPUT_FORMAT = "%H:%M"


# ── WAKE WINDOW GROWTH ──────────────────────────────────────────────────────
# Intermediate wake windows are snapped to this step.
WAKE_WINDOW_ROUNDING_MINUTES = 5


# ── VALIDATION BOUNDS ───────────────────────────────────────────────────────
# Only used by the opt-in validation layer, never by the generator.
MAX_NUM_NAPS = 8
MIN_NAP_LENGTH_MINUTES = 1
MAX_NAP_LENGTH_MINUTES = 4 * 60
MIN_WAKE_WINDOW_MINUTES = 1
MAX_WAKE_WINDOW_MINUTES = 8 * 60
MINUTES_PER_DAY = 24 * 60


# ── DISPLAY ─────────────────────────────────────────────────────────────────
EVENT_LABELS = {
    "Awake": "Awake from",
    "Nap": "Nap from",
    "Bedtime": "Bedtime at",
}
TIME_RANGE_SEPARATOR = " - "


# App-level request guard, the HTTP API refuses larger nap counts before generating.
MAX_REQUEST_NUM_NAPS = 100
