"""Game-wide settings: window size, ECS limits and guy attributes."""

GRAPHICS_PATH = "../resources/graphics/"

MAX_ENTITIES = 10000
MAX_SYSTEMS = 16
MAX_COMPONENTS = 32
MAX_COLLISIONS_PER_ENTITY = 4

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

# Attributes shared by every guy.
GUY_SCAN_RANGE = 100.0
# An average human can safely hold up to 25 kg.
GUY_CARRY_STRENGTH = 25