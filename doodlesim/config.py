# conditions for sim
GRID_SIZE = 20

# -------------------- Starting population -----------------------
INIT_PREY = 100
INIT_PREDATORS = 5

# -------------------- Prey (ant) params -----------------------
PREY_BREED = 3                  # ticks survived before an ant tries to breed

# -------------------- Predator (doodlebug) params -----------------------
PREDATOR_BREED = 8
PREDATOR_STARVE = 3             # ticks without eating before a doodlebug dies

# Text rendering
PREY_CHAR = "o"
PREDATOR_CHAR = "X"
EMPTY_CHAR = "-"

# Driver loop
QUIT_TOKEN = "q"
LOG_TOKEN = "l"
