# config.py: central app settings

import os

# ── Stop-words ──────────────────────────────────────────────────────────
# Short list of common English words never counted as keywords.
# Tokens are lowercased before the membership test.
STOP_WORDS = frozenset({
    "the", "and", "a", "to", "of", "in", "that", "it", "is", "was",
    "for", "on", "with", "as", "by", "at", "from", "or", "an", "be",
    "this", "which", "but", "not", "are", "have", "has", "had",
})

# ── Highlighting ────────────────────────────────────────────────────────
HIGHLIGHT_MARKER = "**"

# ── Keyword count (number input bounds) ─────────────────────────────────
# The logic itself never enforces these; only the form widget does.
MIN_KEYWORD_COUNT = 1
MAX_KEYWORD_COUNT = 20
DEFAULT_KEYWORD_COUNT = int(os.getenv("KW_DEFAULT_COUNT", "5"))

# ── Text sources ────────────────────────────────────────────────────────
UPLOAD_TYPES = ["txt", "md"]
FETCH_TIMEOUT = int(os.getenv("KW_FETCH_TIMEOUT", "20"))     # seconds
FETCH_RETRIES = int(os.getenv("KW_FETCH_RETRIES", "5"))
FETCH_MAX_BACKOFF = 60                                       # seconds

# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("KW_LOG_LEVEL", "INFO").upper()
