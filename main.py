# main.py
import sys

from doodlesim.config import QUIT_TOKEN, LOG_TOKEN
from doodlesim.renderer import population_line
from doodlesim.world import World

PROMPT = f"Press Enter to continue, or type '{QUIT_TOKEN}' (then Enter) to quit."


def read_seed(argv):
    # optional first argument: integer seed for a reproducible run
    if len(argv) < 2:
        return None
    try:
        return int(argv[1])
    except ValueError:
        print(f"[doodlesim] seed must be an integer, got {argv[1]!r}")
        sys.exit(2)


def run(world, read_line=input, write=print):
    """Show, wait for a line, step. Returns the number of ticks taken."""
    show_log = False
    ticks = 0
    while True:
        write(world.render())
        write(population_line(world))
        if show_log and world.action_log:
            write(world.action_log)
        write(PROMPT)
        try:
            ans = read_line().strip()
        except EOFError:
            break
        if ans == QUIT_TOKEN:
            break
        if ans == LOG_TOKEN:
            show_log = not show_log
            write(f"[doodlesim] action log {'on' if show_log else 'off'}")
            continue
        world.step()
        ticks += 1
    return ticks


if __name__ == "__main__":
    seed = read_seed(sys.argv)
    world = World(seed=seed)
    world.initialize()
    if seed is not None:
        print(f"[doodlesim] seed {seed}")
    run(world)
