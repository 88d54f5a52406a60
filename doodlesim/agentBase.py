class Agent:
    species = None
    label = "Agent"
    char = "?"

    def __init__(self, position, agent_id):
        self.position = position
        self.agent_id = agent_id
        self.breed_count = 0

    def __str__(self):
        return f"{self.label}#{self.agent_id} at {self.position}"
