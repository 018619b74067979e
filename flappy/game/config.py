# --- Display ---
WIDTH = 800
HEIGHT = 600
FPS = 60
MAX_DT = 1.0 / 30.0         # clamp stalls (sec)

# --- World / Physics ---
GRAVITY = 1500.0            # px/s^2, pulls down
JUMP_IMPULSE_SPEED = 520.0  # px/s, positive = up
OBSTACLE_VELOCITY = 200.0   # obstacle scroll speed (px/s)
BACKGROUND_VELOCITY = 60.0  # background parallax scroll (px/s)

# --- Player ---
PLAYER_X_RATIO = 0.2        # player's fixed x as a fraction of viewport width
PLAYER_W = 50
PLAYER_H = 50

# --- Obstacle stream ---
OBSTACLE_W = 60
SPAWN_INTERVAL_MS = 2500
GAP_HEIGHT_RANGE = (0.2, 0.8)   # fraction of viewport height
SEED_DEFAULT = 12345

# --- Colors (RGB) ---
COLOR_BG = (112, 197, 206)
COLOR_FG = (245, 245, 245)
COLOR_ACCENT = (250, 210, 60)
COLOR_OBSTACLE = (84, 168, 54)
COLOR_DANGER = (230, 80, 70)
COLOR_PANEL = (20, 40, 60, 160)
