"""Rule constants, live-tunable CONFIG and the gravity curve"""

COLS, ROWS = 10, 20
HIDDEN_ROWS = 2                  # spawn buffer above the visible field
ROWS_TOTAL = ROWS + HIDDEN_ROWS

# Scoring & level progression
LINES_PER_LEVEL = 10
SCORE_TABLE = {1: 40, 2: 100, 3: 300, 4: 1200}   # multiplied by level+1
SOFT_DROP_PER_CELL = 1
HARD_DROP_PER_CELL = 2
MAX_LOCK_RESETS = 15

# Read at use time; the F1 overlay and CLI flags write into it.
CONFIG = {
    "CELL_SIZE": 30,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "LOCK_DELAY_MS": 500,
    "GRAVITY_MULT": 1.0,
    "SOFT_DROP_FACTOR": 20,
    "PREVIEW_COUNT": 3,
    "SHOW_GHOST": True,
    "START_LEVEL": 0,
    "SEED": None,
}

DEFAULTS = dict(CONFIG)


def reset_config():
    CONFIG.clear()
    CONFIG.update(DEFAULTS)


def gravity_interval(level: int) -> int:
    """Milliseconds between gravity steps: 1s at level 0, 60ms faster per level."""
    base, step = 1000, 60
    mult = max(CONFIG["GRAVITY_MULT"], 0.1)
    return max(60, int((base - level * step) / mult))


def soft_drop_interval(level: int) -> int:
    return max(1, int(gravity_interval(level) / max(CONFIG["SOFT_DROP_FACTOR"], 1)))
