# Board and cell constants
BOARD_SIZE = 10

WATER = 0
SHIP = 3
AFFECTED = 5

# Ability masks are square stencils centered on their middle cell.
MASK_SIZE = 5
MASK_CENTER = MASK_SIZE // 2

MASK_OFF = 0
MASK_ON = 1

# Cone occupies rows 0..CONE_HEIGHT-1 of the mask, apex on row 0.
CONE_HEIGHT = 3
DIAMOND_RADIUS = MASK_CENTER

BOARD_HEADER = "Board (0=water, 3=ship, 5=affected area):"
