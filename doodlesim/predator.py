from doodlesim.agentBase import Agent
from doodlesim.config import PREDATOR_CHAR, PREDATOR_STARVE

PREDATOR = "predator"


class Predator(Agent):
    species = PREDATOR
    label = "Doodlebug"
    char = PREDATOR_CHAR

    def __init__(self, position, agent_id):
        super().__init__(position, agent_id)
        self.starve_count = 0       # ticks since last meal

    def starving(self, limit=PREDATOR_STARVE):
        return self.starve_count >= limit
