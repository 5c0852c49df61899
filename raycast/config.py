import math

# Screen settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
FPS = 60
WINDOW_TITLE = "Raycaster"

# Raycasting settings
# Bias applied before rounding so a snapped coordinate lands past the current grid line
EPSILON = 1e-6
# Distance from the player to the near clipping plane (map units)
NEAR_CLIPPING_PLANE = 0.25
# Rays travelling further than this are treated as misses (map units)
FAR_CLIPPING_PLANE = 10.0
# Field of view angle (in radians)
FOV = math.pi * 0.5
# Number of vertical strips cast per frame (stretched to the window width)
SCREEN_COLUMNS = 200
# Side length of one scene cell (map units)
CELL_SIZE = 1.0
# Upper bound on stepper iterations per ray: a ray of length L crosses at
# most L * sqrt(2) / CELL_SIZE grid lines, doubled for headroom
RAY_STEP_LIMIT = 2 * math.ceil(FAR_CLIPPING_PLANE * math.sqrt(2) / CELL_SIZE) + 4

# Player settings
# Movement speed in map units per second
MOVE_SPEED = 2.0
# Rotation speed in radians per second
ROT_SPEED = math.pi * 0.65
# Start position as a fraction of the scene size, used when the world file has none
PLAYER_START_FRACTION = (0.63, 0.63)
# Start facing angle (in radians)
PLAYER_START_DIRECTION = math.pi * 1.25

# Minimap settings
# Offset of the minimap from the top-left corner, as a fraction of the window size
MINIMAP_MARGIN = 0.03
# Side of one minimap cell, as a fraction of the window width
MINIMAP_CELL_FRACTION = 0.03
# Radius of the player marker (map units)
PLAYER_MARKER_RADIUS = 0.2
# Number of triangles used to approximate a filled circle
CIRCLE_SEGMENTS = 24

# Colors
BACKGROUND_COLOR = "#181818"
GRID_COLOR = "#303030"
PLAYER_COLOR = "#ea250c"

# World file: JSON definition of the scene layout (located in raycast/worlds)
WORLD_FILE = 'worlds/default.json'

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
