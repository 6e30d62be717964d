# core/settings.py
import pygame

TITLE = "Platformer motion sandbox"
WIDTH = 960
HEIGHT = 540
FPS = 60

# Simulation
FIXED_DT = 1.0 / 50.0         # seconds per fixed step
MAX_FRAME_DT = 0.05           # longer frames are clamped (debugger pauses, window drags)

# Physics (y-up: negative gravity pulls down)
GRAVITY_Y = -2600.0           # px/s^2
MIN_ALLOWED_TIME = 0.001      # floor for jump time constants on the clamp path

# Collision layers (bit flags)
GROUND_LAYER = 1 << 0

# Movement defaults
MAX_SPEED = 380.0             # px/s
TIME_TO_MAX_SPEED = 0.12      # s, 0 = instant
TIME_TO_STOP = 0.08           # s, 0 = instant

# Jump defaults
APEX_HEIGHT = 130.0           # px
TIME_TO_APEX = 0.32           # s
TIME_FROM_APEX = 0.24         # s
JUMP_AFTER_LEAVING_GROUND_DELAY = 0.10   # coyote time
JUMP_BEFORE_LANDING_DELAY = 0.12         # jump buffer

# Speed-scaled jumps
MIN_APEX_HEIGHT = 90.0
MAX_APEX_HEIGHT = 150.0
TIME_TO_MAX_APEX = 0.34
TIME_FROM_MAX_APEX = 0.26

# Tilemap
TILE_SIZE = 48

# Player body
PLAYER_SIZE = (22, 34)
GROUND_PROBE_HEIGHT = 2

# Colors (R,G,B)
BG_COLOR = (18, 18, 24)
TILE_COLOR = (70, 70, 88)
PLAYER_COLOR = (220, 220, 255)
PLAYER_AIR_COLOR = (255, 200, 150)

# Key bindings
KEYS_LEFT = (pygame.K_a, pygame.K_LEFT)
KEYS_RIGHT = (pygame.K_d, pygame.K_RIGHT)
KEYS_JUMP = (pygame.K_SPACE, pygame.K_w, pygame.K_UP)
