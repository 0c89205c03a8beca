
CONFIG = {
    "CELL_SIZE": 30,
    "FPS": 60,
    "BASE_DROP_MS": 1000,     # drop interval at level 1
    "DROP_STEP_MS": 100,      # faster per level
    "MIN_DROP_MS": 100,
    "LINES_PER_LEVEL": 10,
    "LINE_SCORE": 100,        # per cleared row, times level
    "SEED": None,             # None => nondeterministic piece sequence
    "LOG_LEVEL": "WARNING",
}

_POSITIVE = ("CELL_SIZE", "FPS")


def apply_overrides(overrides):
    """Write known keys into CONFIG; None values are skipped."""
    for key, value in overrides.items():
        if key not in CONFIG:
            raise KeyError(f"unknown config key: {key}")
        if value is None:
            continue
        if key in _POSITIVE and value <= 0:
            raise ValueError(f"{key} must be positive, got {value}")
        CONFIG[key] = value
