"""
constants.py: Centralized configuration for game, palette and window settings.
"""

# -------- Screen Config --------
SCREEN_WIDTH = 128
SCREEN_HEIGHT = 128
DEFAULT_SCALE = 4               # Window pixels per logical pixel
DEFAULT_FPS = 60                # Display refresh the frame scheduler targets
WINDOW_TITLE = "blockflap"

# -------- Block Config --------
BLOCK_X = 32                    # Fixed block X position
BLOCK_SIZE = 16                 # Block is BLOCK_SIZE x BLOCK_SIZE
INIT_GAP_Y = 64                 # Start height of the block and of the first gap

# -------- Pipe Config --------
PIPE_WIDTH = 16
GAP_HEIGHT = 40                 # Half-height of the passable opening
FLIGHT_SPEED = 2                # Horizontal scroll (pixels/frame)

# -------- Physics Config (Pixels / Frame) --------
GRAVITY = 0.1                   # Added to velocity every frame
JUMP = -2                       # Velocity after a flap (replaces, never adds)
RESTART_VELOCITY = -FLIGHT_SPEED  # Velocity the block gets on restart

# -------- Palette (Pico-8 subset) --------
COLORS = ["#000000", "#FFFFFF", "#FF77A8", "#29ADFF"]
BACKGROUND_COLOR = 0
BLOCK_COLOR = 1
TEXT_COLOR = 2
PIPE_COLOR = 3
HITBOX_COLOR = "#FF0000"

# -------- HUD (text baselines) --------
FONT_SIZE = 12
SCORE_POS = (60, 10)
GAME_OVER_POS = (34, 64)
GAME_OVER_TEXT = "GAME OVER"

# -------- Sounds --------
SOUND_FLAP = "flap"
SOUND_HIT = "hit"
SAMPLE_RATE = 22050
