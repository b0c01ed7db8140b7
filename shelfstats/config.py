import os

WINDOWS = ("6", "12", "all")


def _window(value: str) -> str:
    if value not in WINDOWS:
        raise ValueError(f"SHELFSTATS_DEFAULT_WINDOW must be one of {', '.join(WINDOWS)}, got {value!r}")
    return value


# Trailing window used when a request does not pick one
DEFAULT_WINDOW = _window(os.environ.get("SHELFSTATS_DEFAULT_WINDOW", "12"))

# Ranking sizes
TOP_AUTHORS = int(os.environ.get("SHELFSTATS_TOP_AUTHORS", "10"))
CATEGORY_DISPLAY_LIMIT = int(os.environ.get("SHELFSTATS_CATEGORY_DISPLAY_LIMIT", "7"))

LOG_LEVEL = os.environ.get("SHELFSTATS_LOG_LEVEL", "WARNING")
