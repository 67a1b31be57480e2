"""Creature energy and metabolism constants.

Energy is an unsigned integer budget. Every point a creature burns through
metabolism is deposited back onto its tile as food, so energy only moves
between creatures and tiles; it is never created or destroyed by upkeep.
"""

# Newborn state (seeded creatures and offspring alike)
INITIAL_ENERGY = 100
INITIAL_SENSOR_VALUE = 128  # Midpoint: no directional preference yet

# Sensor registers are unsigned bytes
SENSOR_MIN = 0
SENSOR_MAX = 255

# Eat: food units moved from the target tile per opcode
EAT_QUOTA = 10

# Attack: energy drained from the victim per opcode
ATTACK_DAMAGE = 20

# Reproduce: energy needed to attempt it, and energy paid on success
REPRODUCE_THRESHOLD = 200
REPRODUCE_COST = 100

# Per-tick upkeep by dietary class
HERBIVORE_METABOLISM = 1
CARNIVORE_METABOLISM = 5
OMNIVORE_METABOLISM = 10
