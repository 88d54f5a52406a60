# registry.py


class Registry:
    """
    Owns every live agent, keyed by id. The lattice only points in here.
    Iteration order carries no meaning.
    """
    def __init__(self):
        self._agents = {}
        self._next_id = 0

    def next_id(self):
        agent_id = self._next_id
        self._next_id += 1
        return agent_id

    def register(self, agent):
        self._agents[agent.agent_id] = agent

    def unregister(self, agent):
        if self.contains(agent):
            del self._agents[agent.agent_id]

    def contains(self, agent):
        return self._agents.get(agent.agent_id) is agent

    __contains__ = contains

    def get(self, agent_id):
        return self._agents.get(agent_id)

    def all(self):
        return list(self._agents.values())

    def count(self, species):
        return sum(1 for a in self._agents.values() if a.species == species)

    def __len__(self):
        return len(self._agents)

    def __iter__(self):
        return iter(self.all())
