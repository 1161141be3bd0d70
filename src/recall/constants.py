BOARD_FILES = "abcdefgh"
BOARD_RANKS = 8
BOARD_CAPACITY = len(BOARD_FILES) * BOARD_RANKS

# Round timing (seconds).
MEMORIZE_SECONDS = 15
COUNTDOWN_INTERVAL = 1.0

# Counts shown in the settings controls before the player changes them.
DEFAULT_WHITE_COUNT = 4
DEFAULT_BLACK_COUNT = 4

# Window and layout.
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Board Recall"
BOTTOM_MARGIN = 60
TOP_MARGIN = 60
SQUARE_SIZE = 72
# Board may not exceed these fractions of the window.
BOARD_MAX_WIDTH_PCT = 0.65
BOARD_MAX_HEIGHT_PCT = 0.85
# Gap between the board edge and the side columns.
SIDE_GAP = 30
# Token palette (right column): two columns of six swatches.
PALETTE_SWATCH_SIZE = 56
PALETTE_SWATCH_GAP = 8
# Control buttons (left column).
CONTROL_BUTTON_WIDTH = 150.0
CONTROL_BUTTON_HEIGHT = 44.0
CONTROL_SMALL_BUTTON_SIZE = 36.0
CONTROL_GAP = 14.0

LIGHT_SQUARE_COLOR = (240, 217, 181)
DARK_SQUARE_COLOR = (181, 136, 99)
CORRECT_SQUARE_COLOR = (110, 190, 110)
INCORRECT_SQUARE_COLOR = (214, 96, 96)
