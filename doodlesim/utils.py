import random


class RandomOrder:
    """
    Shared random source for one world. Seeded once on construction,
    every shuffle and position draw after that pulls from the same stream
    so a seeded run replays exactly.
    """
    def __init__(self, seed=None):
        self.seed = seed
        self.rng = random.Random(seed)

    def shuffle(self, items):
        out = list(items)
        self.rng.shuffle(out)
        return out

    def random_position(self, size):
        x = self.rng.randrange(size)
        y = self.rng.randrange(size)
        return (x, y)
