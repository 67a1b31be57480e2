"""World grid configuration constants."""

# Default grid dimensions (one tile per screen pixel when rendered)
WORLD_WIDTH = 800
WORLD_HEIGHT = 600

# Food deposited on every tile when the world is created
STARTING_TILE_FOOD = 100

# Number of creatures scattered on the grid at startup
INITIAL_POPULATION = 500
