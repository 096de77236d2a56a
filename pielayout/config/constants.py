"""Application-wide constants."""

APP_NAME = "PieLayout"
APP_VERSION = "0.1.0"
ORG_NAME = "PieLayout"
ORG_DOMAIN = "pielayout.org"

# Menu dimensions (pixels, square)
MENU_SIZE_DEFAULT = 200
MENU_SIZE_MIN = 80
MENU_SIZE_MAX = 600

# Drag-resize: screen pixels moved per pointer pixel
DRAG_SENSITIVITY = 2.2

# Ring proportions, as fractions of the menu size / outer radius
BORDER_RATIO = 0.03
MID_RADIUS_RATIO = 0.3
INNER_RADIUS_RATIO = 0.1
GAP_RATIO = 0.05
EDGE_RATIO = 0.34
CORNER_WIDTH_RATIO = 0.4
CORNER_DISTANCE_RATIO = 0.8

# Pie colours (RGBA)
MENU_DARK_COLOR = (18, 36, 48, 200)
MENU_LIGHT_COLOR = (66, 79, 92, 237)
MENU_ACTIVE_COLOR = (45, 155, 203, 255)
# Backing disc: grey luminance / alpha in [0, 1]
MENU_BACKGROUND_LUMINANCE = 0.7
MENU_BACKGROUND_ALPHA = 0.7

# Layout preview overlay
PREVIEW_COLOR = (80, 158, 255, 125)
