from doodlesim.config import PREY_BREED, PREDATOR_BREED
from doodlesim.prey import PREY
from doodlesim.predator import PREDATOR

# ───────────────────────── helpers ────────────────────────────────────
def first_empty(world, positions):
    for pos in positions:
        if world.lattice.is_empty(pos):
            return pos
    return None

def first_prey(world, positions):
    for pos in positions:
        other = world.agent_at(pos)
        if other is not None and other.species == PREY:
            return other
    return None

def try_breed(agent, world, neighbors, threshold, create):
    # one placement attempt per threshold hit, counter resets either way
    agent.breed_count += 1
    if agent.breed_count < threshold:
        return None
    spot = first_empty(world, world.order.shuffle(neighbors))
    agent.breed_count = 0
    if spot is None:
        return None
    baby = create(spot)
    world.log(f"{agent} bred {baby}")
    return baby

# ───────────────────────── ant rules ──────────────────────────────────
def prey_turn(agent, world):
    # 1. wander into the first free cell, else stay put
    neighbors = world.order.shuffle(world.lattice.neighbors4(agent.position))
    spot = first_empty(world, neighbors)
    if spot is not None:
        world.move_agent(agent, spot)

    # 2. breed off the turn-start neighbourhood
    try_breed(agent, world, neighbors, PREY_BREED, world.create_prey)

# ───────────────────────── doodlebug rules ────────────────────────────
def predator_turn(agent, world):
    # 1. starved last turn -> gone before doing anything else
    if agent.starving():
        world.log(f"{agent} starved")
        world.remove_from_world(agent.position)
        return

    # 2. eat an adjacent ant if there is one
    neighbors = world.order.shuffle(world.lattice.neighbors4(agent.position))
    meal = first_prey(world, neighbors)
    if meal is not None:
        spot = meal.position
        world.log(f"{agent} ate {meal}")
        world.remove_from_world(spot)
        world.move_agent(agent, spot)
        agent.starve_count = 0
    else:
        # 3. no meal: wander, hungrier whether or not a move happened
        neighbors = world.order.shuffle(neighbors)
        spot = first_empty(world, neighbors)
        if spot is not None:
            world.move_agent(agent, spot)
        agent.starve_count += 1

    # 4. breed
    try_breed(agent, world, neighbors, PREDATOR_BREED, world.create_predator)

# ───────────────────────── dispatch ───────────────────────────────────
RULES = {
    PREY: prey_turn,
    PREDATOR: predator_turn,
}

def take_turn(agent, world):
    RULES[agent.species](agent, world)
