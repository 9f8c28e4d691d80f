INITIAL_SCORE = 0

# Summary overlay layout (pixels)
OVERLAY_WIDTH = 360
OVERLAY_ROW_HEIGHT = 30
OVERLAY_MARGIN = 20
OVERLAY_ALPHA = 0.6
MAX_RENDERED_ROWS = 8
