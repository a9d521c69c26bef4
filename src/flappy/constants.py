"""
constants.py: Centralized configuration for the game simulation.
"""

import math

# -------- Scheduler Config --------
TICK_RATE = 60                  # Host scheduler ticks per second (display refresh)

# -------- Playfield Config --------
PLAYFIELD_WIDTH = 400
PLAYFIELD_HEIGHT = 600
FLOOR_HEIGHT = 60               # Ground strip at the bottom of the playfield

# -------- Actor Config --------
ACTOR_X = 80                    # Fixed actor X position
ACTOR_WIDTH = 34
ACTOR_HEIGHT = 24
MAX_ROTATION = math.pi / 4      # Cosmetic tilt clamp (radians)
ROTATION_DIVISOR = 10.0         # rotation = vy / ROTATION_DIVISOR
WING_FRAME_TICKS = 10           # Ticks per wing animation frame
WING_FRAMES = 3

# -------- Physics Config (units / frame) --------
GRAVITY = 0.35                  # Added to vertical velocity every tick
JUMP_IMPULSE = -7.5             # Velocity set by an activate while playing

# -------- Obstacle Config --------
OBSTACLE_COUNT = 3
OBSTACLE_WIDTH = 52
OBSTACLE_SPEED = 2.5            # Horizontal speed (units/frame)
OBSTACLE_SPACING = 200          # Horizontal distance between consecutive obstacles
GAP_HEIGHT = 140
MIN_GATE = 60                   # Smallest allowed gate offset from the top

# -------- Notification Config --------
NOTIFY_TIMEOUT = 5.0            # seconds
BUFFER_SIZE = 65536
