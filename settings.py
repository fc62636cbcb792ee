# settings.py

# Window / display
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
TITLE = "Note Village"

# Colors
COLOR_BG = (15, 15, 20)
COLOR_PLAYER = (74, 144, 217)
COLOR_VILLAGER = (90, 175, 90)
COLOR_GRASS = (60, 100, 60)
COLOR_PLAZA = (150, 140, 120)
COLOR_ROAD = (120, 100, 80)
COLOR_FOREST = (30, 80, 30)

# World layout
FOREST_BORDER_WIDTH = 96    # Depth of the tree band outside the playable area
ZONE_GAP = 64               # Space between zones, reserved for roads

# Villagers
VILLAGER_PADDING = 30       # Inward padding from zone edges for home positions
VILLAGER_PALETTES = 8       # Sprite palette indices 0..7

# Structures
STRUCTURE_SPACING = 8       # Padding added to candidate boxes in collision tests
BENCH_INSET = 30            # Bench distance from plaza corners
SIGN_OFFSET = 16            # Sign distance below a zone's top edge

HOUSE_SIZE = 48            # Houses are square; the largest zone footprint
HOUSE_MAX_ATTEMPTS = 12
HOUSE_BASE_RADIUS = 20
HOUSE_RADIUS_STEP = 15

DECORATION_MAX_ATTEMPTS = 10
DECORATION_EDGE_BAND = 28   # Edge decorations stay within this distance of a zone edge
NEAR_HOUSE_RADIUS = 48      # Barrels/crates stay within this distance of a house

# Forest
TREE_SPACING = 32
TREE_JITTER = 8
TREE_VARIANTS = 3
