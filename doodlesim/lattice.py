# lattice.py
import numpy as np

EMPTY = -1

# ─── adjacency ─────────────────────────────────────────────────────────
# fixed scan order before any shuffling, no diagonals, no wraparound
NEIGHBOR_OFFSETS = [(0, 1), (0, -1), (1, 0), (-1, 0)]


class Lattice:
    """
    N x N grid of agent ids (EMPTY where nothing lives).
    The grid never holds agents themselves, only the id the registry
    files them under.
    """
    def __init__(self, size):
        self.size = size
        self.cells = np.full((size, size), EMPTY, dtype=np.int64)

    def in_bounds(self, pos):
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def occupant(self, pos):
        if not self.in_bounds(pos):
            return None
        agent_id = int(self.cells[pos])
        return None if agent_id == EMPTY else agent_id

    def is_empty(self, pos):
        return self.in_bounds(pos) and bool(self.cells[pos] == EMPTY)

    def place(self, pos, agent_id):
        if not self.in_bounds(pos):
            return
        self.cells[pos] = agent_id

    def clear(self, pos):
        if not self.in_bounds(pos):
            return
        self.cells[pos] = EMPTY

    def neighbors4(self, pos):
        x, y = pos
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nxt = (x + dx, y + dy)
            if self.in_bounds(nxt):
                result.append(nxt)
        return result

    def occupied(self):
        """(position, agent id) for every non-empty cell, row by row."""
        xs, ys = np.nonzero(self.cells != EMPTY)
        return [((int(x), int(y)), int(self.cells[x, y])) for x, y in zip(xs, ys)]
