# viz/renderer_colors.py
BG = (0, 0, 0)
GRID = (26, 26, 26)
HEAD = (120, 255, 120)
BODY = (0, 200, 0)
BODY_TAIL = (0, 120, 0)           # tail end of the body gradient
FOOD = (230, 40, 40)
BONUS = (255, 208, 0)
TEXT = (255, 255, 255)
DIM = (0, 0, 0, 160)              # overlay behind PAUSED / GAME OVER

FOOD_COLORS = {"standard": FOOD, "bonus": BONUS}
