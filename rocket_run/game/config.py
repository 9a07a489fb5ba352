# --- Display ---
WIDTH = 1024
HEIGHT = 576
FPS = 60
FLOOR_Y = HEIGHT * 3 // 4   # ground line (px from top)

# --- Character ---
START_X = WIDTH // 2        # screen x at spawn
START_LIVES = 3
WALK_STEP = 5               # px per frame, horizontal
FALL_STEP = 2               # px per frame while airborne
PLUMMET_STEP = 9            # px per frame while falling through a chasm
JUMP_HEIGHT = 100           # instant rise on jump
GAME_OVER_DROP = 100        # y bump applied in the game-over state

# --- Scrolling ---
SCROLL_LEFT_BOUND = 0.2     # fraction of WIDTH, background scrolls left of this
SCROLL_RIGHT_BOUND = 0.8    # fraction of WIDTH, background scrolls right of this

# --- Contacts ---
PLATFORM_CONTACT_TOLERANCE = 2
COLLECT_RADIUS = 50
GOAL_REACH_DISTANCE = 15

# --- World extent (layout validation) ---
WORLD_MIN_X = -1000
WORLD_MAX_X = 4000

# --- Per-frame effects ---
# True reproduces the arcade behaviour: the life-lost sound retriggers every
# plummet frame and the game-over drop is applied every frame.
REPEAT_FRAME_EFFECTS = True

# --- Debug ---
DEBUG_EVENTS = False        # print every gameplay event from the runner

# --- Audio (file name, volume) ---
SOUNDS = {
    "jump": ("jump.mp3", 0.2),
    "collect": ("collect.wav", 0.15),
    "life_lost": ("life_lost.wav", 0.05),
    "level_complete": ("level_complete.wav", 0.3),
}
ASSETS_DIR = "assets"

# --- Colors (RGB) ---
COLOR_SKY = (11, 0, 84)
COLOR_GROUND = (214, 92, 160)
COLOR_FG = (255, 255, 255)
COLOR_CLOUD = (190, 180, 235)
COLOR_MOUNTAIN = (70, 40, 130)
COLOR_MOUNTAIN_CAP = (230, 220, 255)
COLOR_TRUNK = (90, 50, 80)
COLOR_LEAVES = (40, 160, 140)
COLOR_CHASM = (5, 0, 40)
COLOR_CHASM_LAVA = (255, 110, 40)
COLOR_COLLECTABLE = (255, 215, 60)
COLOR_PLAT = (150, 60, 200)
COLOR_ROCKET = (200, 205, 220)
COLOR_FLAME = (255, 140, 30)
COLOR_CHAR_BODY = (238, 130, 238)
COLOR_CHAR_HEAD = (180, 180, 200)
COLOR_DANGER = (255, 86, 110)
