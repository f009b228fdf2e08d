"""Playfield geometry, spawn state and timing shared by the game modules."""

# Playfield (logical units)
FIELD_WIDTH = 600
FIELD_HEIGHT = 800

# Entities
BALL_SIZE = 16
PADDLE_WIDTH = 20.0
PADDLE_HEIGHT = 100.0

# Ball spawn state: x, y, dx, dy
SPAWN_X = 300.0
SPAWN_Y = 400.0
SPAWN_DX = 5.0
SPAWN_DY = 5.0

# Timing
FRAME_INTERVAL = 0.016  # seconds per physics step (~60Hz)
FPS = 60

# Colors
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)
WHITE = (255, 255, 255)
BUTTON_FILL = (98, 0, 238)
BUTTON_HOVER = (124, 77, 255)
