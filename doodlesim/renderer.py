# renderer.py
from doodlesim.config import EMPTY_CHAR


def render_text(world):
    """
    Header with the iteration about to be shown (1-indexed), then one line per
    grid row, every cell printed as its glyph followed by a space.
    """
    lines = [f"World at iteration {world.age + 1}:"]
    for r in range(world.size):
        row = ""
        for c in range(world.size):
            agent = world.agent_at((r, c))
            row += (agent.char if agent is not None else EMPTY_CHAR) + " "
        lines.append(row)
    return "\n".join(lines) + "\n"


def population_line(world):
    counts = world.population()
    return f"Turn: {world.age}   Ants: {counts['prey']}   Doodlebugs: {counts['predator']}"
