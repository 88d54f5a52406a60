# world.py

from doodlesim.config import GRID_SIZE, INIT_PREY, INIT_PREDATORS
from doodlesim.lattice import Lattice
from doodlesim.registry import Registry
from doodlesim.utils import RandomOrder
from doodlesim.prey import Prey, PREY
from doodlesim.predator import Predator, PREDATOR
from doodlesim.ai_logic import take_turn
from doodlesim.renderer import render_text


class World:
    def __init__(self, size=GRID_SIZE, initial_prey=INIT_PREY,
                 initial_predators=INIT_PREDATORS, seed=None):
        if size < 1:
            raise ValueError(f"grid size must be at least 1, got {size}")
        if initial_prey < 0 or initial_predators < 0:
            raise ValueError("initial population counts cannot be negative")
        if initial_prey + initial_predators > size * size:
            raise ValueError(
                f"{initial_prey + initial_predators} starting agents "
                f"do not fit on a {size}x{size} grid"
            )

        self.size = size
        self.initial_prey = initial_prey
        self.initial_predators = initial_predators
        self.age = 0
        self.lattice = Lattice(size)
        self.registry = Registry()
        self.order = RandomOrder(seed)
        self.action_log = ""
        self._initialized = False

    # -----------------------------------------------------------
    # lookups
    # -----------------------------------------------------------
    @property
    def agents(self):
        return self.registry.all()

    def agent_at(self, pos):
        agent_id = self.lattice.occupant(pos)
        if agent_id is None:
            return None
        return self.registry.get(agent_id)

    def population(self):
        return {
            PREY: self.registry.count(PREY),
            PREDATOR: self.registry.count(PREDATOR),
        }

    # -----------------------------------------------------------
    # mutation, always lattice + registry together
    # -----------------------------------------------------------
    def _spawn(self, cls, pos):
        if not self.lattice.is_empty(pos):
            return None
        agent = cls(pos, self.registry.next_id())
        self.registry.register(agent)
        self.lattice.place(pos, agent.agent_id)
        return agent

    def create_prey(self, pos):
        return self._spawn(Prey, pos)

    def create_predator(self, pos):
        return self._spawn(Predator, pos)

    def move_agent(self, agent, new_pos):
        self.lattice.clear(agent.position)
        self.lattice.place(new_pos, agent.agent_id)
        agent.position = new_pos
        self.log(f"{agent.label}#{agent.agent_id} moved to {new_pos}")

    def remove_from_world(self, pos):
        """Clear the cell and drop whoever was in it. Returns the removed agent."""
        agent = self.agent_at(pos)
        self.lattice.clear(pos)
        if agent is not None:
            self.registry.unregister(agent)
        return agent

    # -----------------------------------------------------------
    # simulation
    # -----------------------------------------------------------
    def initialize(self):
        """Scatter the starting doodlebugs, then the starting ants."""
        if self._initialized:
            raise RuntimeError("world is already initialized")
        self._initialized = True

        for cls, count in ((Predator, self.initial_predators),
                           (Prey, self.initial_prey)):
            placed = 0
            while placed < count:
                pos = self.order.random_position(self.size)
                if self._spawn(cls, pos) is not None:
                    placed += 1

    def step(self):
        """
        One tick. Everyone alive at the start gets one turn in a fresh random
        order; agents eaten or starved earlier in the tick are skipped and
        agents born during the tick wait for the next one.
        """
        self.action_log = ""
        snapshot = self.order.shuffle(self.registry.all())
        for agent in snapshot:
            if agent not in self.registry:
                continue
            take_turn(agent, self)
        self.age += 1

    def render(self):
        return render_text(self)

    def log(self, msg):
        self.action_log += f"[{self.age + 1}] {msg}\n"

    def __str__(self):
        return self.render()
