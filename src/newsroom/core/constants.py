"""Application-wide constants.

These are fixed values that don't change between environments.
For configurable values, see config.py Settings.
"""

# ─────────────────────────────────────────────────────────────
# News classification
# ─────────────────────────────────────────────────────────────
NEW_NEWS_MAX_AGE_DAYS = 3  # Published fewer than 3 days ago
IMPORTANT_MIN_SCORE = 8
MODERATELY_IMPORTANT_MIN_SCORE = 5
MODERATELY_IMPORTANT_MAX_SCORE = 7
SENSATIONAL_WORDS = ("espectacular", "increible", "grandioso")

ARTICLE_MIN_NOTABLE_LINKS = 2
DEFAULT_SCOOP_THRESHOLD = 2_000_000
CELEBRITY_INTERVIEWEE = "Dibu Martinez"

# Kind codes stamped on each news variant
ARTICLE_CODE = "02"
SCOOP_CODE = "01"
INTERVIEW_CODE = "R"

# ─────────────────────────────────────────────────────────────
# Payment defaults (can be overridden in Settings)
# ─────────────────────────────────────────────────────────────
DEFAULT_PAYMENT_MINIMUM_WORDS = 1000
DEFAULT_PAYMENT_BASE = 50_000.0
DEFAULT_PAYMENT_BONUS = 75_000.0

# ─────────────────────────────────────────────────────────────
# Notifications
# ─────────────────────────────────────────────────────────────
SPECIAL_NEWS_SUBJECT = "Special news"
DASHBOARD_TITLE = "News to publish:"
DEFAULT_TRANSPORT_TIMEOUT = 10.0  # seconds
