"""
Constants for the dice roller.
"""

# Event loop
TICK_RATE_MS = 250
INPUT_POLL_INTERVAL_MS = 10  # sleep between non-blocking key checks

# Layout (in terminal cells)
SCREEN_MARGIN = 2
SELECTOR_WIDTH_PERCENT = 20
LOG_WIDTH_PERCENT = 50
BORDER_ROWS = 2  # top and bottom border of a boxed panel

# Panels
SELECTOR_TITLE = "Dice"
LOG_TITLE = "Rolls"
HIGHLIGHT_SYMBOL = ">> "

# Persisted state file
# Format: <rolled-value> - (<state>, <increment>)
STATE_LINE_FORMAT = "{value} - ({state}, {increment})"
STATE_LINE_PATTERN = r"^(\d+) - \((\d+), (\d+)\)$"

# PCG64 internals are 128-bit unsigned integers
RNG_STATE_BITS = 128
