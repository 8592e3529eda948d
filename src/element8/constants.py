BOARD_SIZE = 10
BARRIER_COUNT = 10

MIN_PLAYERS = 2
MAX_PLAYERS = 8
CORNER_COUNT = 4

DIE_SIDES = 6

STARTING_DAMAGE_MULTIPLIER = 1
# Each elimination raises the global damage multiplier by this step.
DAMAGE_MULTIPLIER_STEP = 1

HEAL_CARD_AMOUNT = 2
# Limited-use flame item; each use adds this much damage to a winning attack.
FLAME_CARD_COUNT = 7
FLAME_DAMAGE_BONUS = 1
FLAME_USE_CHANCE = 0.5

# One player receives the stone card at setup; it may absorb a single hit.
GRANT_BLOCK_TOKEN = True
BLOCK_CHANCE = 0.5

# Chance of a card draw right after combat in a full turn.
POST_MOVE_CARD_CHANCE = 0.5
# Chance of a random map event (automatic card draw) when a turn ends.
RANDOM_EVENT_CHANCE = 0.1
