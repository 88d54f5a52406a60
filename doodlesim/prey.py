from doodlesim.agentBase import Agent
from doodlesim.config import PREY_CHAR

PREY = "prey"


class Prey(Agent):
    species = PREY
    label = "Ant"
    char = PREY_CHAR
