"""
constants.py: Centralized configuration for the simulation.

Lengths and speeds are in base units; the World multiplies them by the
session's scale factor.
"""

# -------- Time Config --------
FPS = 60                        # Simulation ticks per second
TICK_TIME = 1.0 / FPS           # Fixed time step (seconds)
DUCK_DELAY = 0.2                # Seconds a duck hold must last before ducking
KEEP_AWAKE_INTERVAL_TICKS = 25 * FPS  # Re-issue keep-awake every 25 seconds
KEEP_AWAKE_SECONDS = 30

# -------- Screen Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 480
GROUND_OFFSET = 120             # Ground line distance from the bottom edge
PLAYER_X = 80
TRACK_WIDTH = 2404              # Ground tile width; scroll offset wraps here
TRACK_HEIGHT = 28
TRACK_LIFT = 20                 # Track is drawn this far above the ground line

# -------- Physics Config (per tick) --------
GRAVITY = 1.0
JUMP_FORCE = -18.0
BASE_SPEED = 10.0
CLOUD_SPEED_RATIO = 0.3

# -------- Player Config --------
STAND_SIZE = (88, 94)
DUCK_SIZE = (118, 60)
SPRITE_SINK = 3                 # Sprites overlap the ground line by this much
RUN_ANIM_STEP = 0.3
FLYER_ANIM_STEP = 0.2
ANIM_PERIOD = 2

# -------- Hitbox Config --------
PLAYER_INSET_X = 15
PLAYER_INSET_W = 30
PLAYER_INSET_H = 10
GROUND_INSET_X = 10
FLYER_INSET = 5

# -------- Spawning Config --------
OBSTACLE_SPAWN_RATE = 0.01
CLOUD_SPAWN_RATE = 0.01
MIN_GAP = 100
GAP_JITTER = 50
GROUND_CHANCE = 0.7             # Ground vs. flying once flyers are unlocked
FLYER_MIN_SCORE = 500           # Flyers never appear below this score
FLYER_HEIGHTS = (50, 75, 100, 125)
CLOUD_SIZE = (84, 101)
CLOUD_TOP = 50
CLOUD_BAND = 0.3                # Clouds spawn within the top 30% of the screen

# -------- Difficulty Config --------
SCORE_PER_TICK = 0.1
SPEED_INCREMENT_INTERVAL = 100
SPEED_INCREMENT = 1.0

# -------- Haptics Config (milliseconds) --------
PULSE_SHORT_MS = 100
PULSE_BRIEF_MS = 50

# -------- UI Config --------
BUTTON_PADDING = 6
TEXT_SIZES = {
    "title": 28,
    "instructions": 20,
    "score": 20,
    "high_score": 16,
    "game_over": 24,
    "option": 20,
    "button": 20,
}
FONT_COLORS = {"light": 0x535353, "dark": 0xFFFFFF, "highlight": 0xFF6B6B}
BACKGROUND_COLORS = {"light": 0xF7F7F7, "dark": 0x363636}

# -------- Settings Config --------
TEXT_SIZE_MODIFIERS = {"small": 0.8, "normal": 1.0, "large": 1.2}
SCALE_FACTORS = {"small": 0.5, "normal": 0.7, "large": 0.9}

# -------- Storage Config --------
DB_FILE = "dino_run.db"
