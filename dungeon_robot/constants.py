"""All game constants — no imports beyond stdlib."""

# Map glyphs (level text and rendering share the same characters)
WALL    = '#'
EMPTY   = '.'
KEY     = 'K'
DOOR    = 'D'
TRAP    = '^'
EXIT    = 'E'
START   = 'S'
PLAYER  = 'R'
UNKNOWN = '?'   # tile type with no glyph
HIDDEN  = ' '   # never discovered

LOG_LINES = 4   # number of message log rows under the map

# Robot stats
BASE_VISION_RADIUS = 3
BASE_MOVE_COST     = 2
STARTING_ENERGY    = 100

SENSOR_BONUS = 2   # vision radius added by the sensor module

# Module names, in toggle order (key '1' toggles index 0, '2' index 1)
SENSOR_NAME     = 'Sensor'
EFFICIENCY_NAME = 'Efficiency'

ON_LABEL  = 'ON'
OFF_LABEL = 'OFF'

HINT = "Arrows/WASD:move  1/2:toggle modules  Q/Esc:quit"

WIN_MESSAGE  = "Congratulations! The robot found the exit."
LOSE_MESSAGE = "Unfortunately, the robot did not make it."

# Color pair indices
COLOR_WALL   = 1
COLOR_FLOOR  = 2
COLOR_PLAYER = 3
COLOR_PANEL  = 4
COLOR_LOW    = 5  # energy running out
COLOR_DARK   = 6  # discovered but not currently visible
COLOR_KEY    = 7  # keys (green)
COLOR_EXIT   = 8  # exit (magenta)
COLOR_DOOR   = 9  # doors (yellow)
COLOR_HAZARD = 10 # traps (red)

LOW_ENERGY = 20   # panel turns red at or below this
