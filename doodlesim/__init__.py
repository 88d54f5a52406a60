from doodlesim.world import World
from doodlesim.prey import Prey
from doodlesim.predator import Predator

__all__ = ["World", "Prey", "Predator"]
