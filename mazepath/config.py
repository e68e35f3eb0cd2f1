DEFAULT_ROWS = 10
DEFAULT_COLS = 10
MIN_SIZE = 3

WALL_PROBABILITY = 0.5
WOBBLE_PROBABILITY = 0.5

STEP_DELAY = 1.0

WALL_GLYPH = 'X'
OPEN_GLYPH = '_'
START_GLYPH = 'S'
GOAL_GLYPH = 'O'

# Video
FIG_WIDTH = 9
FIG_HEIGHT = 9
DPI = 120

BG_COLOR = '#0A0A15'
WALL_COLOR = '#FFFFFF'
OPEN_COLOR = '#1A1A2E'
VISITED_COLOR = '#3A1C71'
FRONTIER_COLOR = '#00CCFF'
CARVE_COLOR = '#00FF7F'
PATH_COLOR = '#FF3333'
START_COLOR = '#00FF7F'
END_COLOR = '#FF4500'

TARGET_FPS = 10
HOLD_FRAMES = 10
VIDEO_BITRATE = 3000
