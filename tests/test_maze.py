import io
import random
from collections import deque

import pytest

from mazearcade.manager import MiniGameManager
from mazearcade.maze import FINISH, GAME, PATH, WALL, Maze
from mazearcade.minigame import MiniGame
from mazearcade.utils import Color, Console

AVATAR = "😎"
STEPS = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}


class RecordingGame(MiniGame):
    def __init__(self, console, log):
        super().__init__("g", console)
        self.log = log

    def play(self):
        self.log.append(self.name)


def make_manager():
    out = io.StringIO()
    console = Console(io.StringIO(""), out, interactive=False)
    log = []
    return MiniGameManager(console, [RecordingGame(console, log)]), log, out


def shortest_route(grid):
    start = (1, 1)
    goal = (len(grid) - 2, len(grid[0]) - 2)
    previous = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        for key, (dy, dx) in STEPS.items():
            nxt = (cell[0] + dy, cell[1] + dx)
            if nxt not in previous and grid[nxt[0]][nxt[1]] != WALL:
                previous[nxt] = (cell, key)
                queue.append(nxt)
    if goal not in previous:
        return None
    keys = []
    cell = goal
    while previous[cell] is not None:
        cell, key = previous[cell]
        keys.append(key)
    return "".join(reversed(keys))


def open_neighbour(maze):
    for key, (dy, dx) in STEPS.items():
        y, x = 1 + dy, 1 + dx
        if maze.grid[y][x] != WALL:
            return key, y, x
    raise AssertionError("start has no open neighbour")


def test_grid_shape():
    maze = Maze(5, 4, AVATAR, 0, random.Random(1))
    assert len(maze.grid) == 2 * 4 + 1
    assert all(len(row) == 2 * 5 + 1 for row in maze.grid)


def test_border_is_wall_and_endpoints_placed():
    maze = Maze(6, 6, AVATAR, 2, random.Random(2))
    grid = maze.grid
    assert all(cell == WALL for cell in grid[0] + grid[-1])
    assert all(row[0] == WALL and row[-1] == WALL for row in grid)
    assert grid[1][1] == AVATAR
    assert grid[-2][-2] == FINISH
    assert maze.player.position == maze.start_position() == (1, 1)


@pytest.mark.parametrize("seed", range(5))
def test_finish_is_reachable(seed):
    maze = Maze(8, 8, AVATAR, 3, random.Random(seed))
    manager, _, _ = make_manager()
    route = shortest_route(maze.grid)
    assert route
    results = [maze.move(key, manager) for key in route]
    assert results[-1] is True
    assert maze.player.position == (len(maze.grid) - 2, len(maze.grid[0]) - 2)


def test_same_seed_gives_same_maze():
    first = Maze(7, 7, AVATAR, 4, random.Random(11))
    second = Maze(7, 7, AVATAR, 4, random.Random(11))
    assert first.grid == second.grid


def test_zero_density_has_no_games():
    maze = Maze(6, 6, AVATAR, 0, random.Random(3))
    cells = [cell for row in maze.grid for cell in row]
    assert cells.count(GAME) == 0
    assert set(cells) == {WALL, PATH, AVATAR, FINISH}


def test_full_density_turns_every_path_into_game():
    maze = Maze(6, 6, AVATAR, 20, random.Random(3))
    cells = [cell for row in maze.grid for cell in row]
    assert PATH not in cells
    assert GAME in cells


def test_wall_bump_keeps_position():
    maze = Maze(5, 5, AVATAR, 0, random.Random(4))
    manager, log, out = make_manager()
    assert maze.move("w", manager) is False
    assert maze.player.position == (1, 1)
    assert "哎呀！你撞墙了" in out.getvalue()
    assert log == []


def test_unknown_direction_is_ignored():
    maze = Maze(5, 5, AVATAR, 0, random.Random(4))
    manager, _, out = make_manager()
    before = [row[:] for row in maze.grid]
    assert maze.move("x", manager) is False
    assert maze.grid == before
    assert out.getvalue() == ""


def test_walking_to_finish():
    maze = Maze(5, 5, AVATAR, 0, random.Random(5))
    manager, _, _ = make_manager()
    route = shortest_route(maze.grid)
    results = [maze.move(key, manager) for key in route]
    assert results[-1] is True
    assert not any(results[:-1])
    assert maze.player.position == (len(maze.grid) - 2, len(maze.grid[0]) - 2)
    assert maze.grid[1][1] == PATH
    assert maze.grid[maze.player.y][maze.player.x] == AVATAR


def test_game_square_starts_a_game():
    maze = Maze(5, 5, AVATAR, 0, random.Random(6))
    manager, log, out = make_manager()
    key, y, x = open_neighbour(maze)
    maze.grid[y][x] = GAME
    assert maze.move(key, manager) is False
    assert log == ["g"]
    assert maze.player.position == (y, x)
    assert "小游戏时间！" in out.getvalue()


def test_render_colours_cells():
    maze = Maze(4, 4, AVATAR, 0, random.Random(7))
    text = maze.render()
    assert len(text.splitlines()) == len(maze.grid)
    assert f"{Color.GREEN}{WALL}{Color.RESET}" in text
    assert f"{Color.YELLOW}{FINISH}{Color.RESET}" in text


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0)])
def test_empty_maze_rejected(width, height):
    with pytest.raises(ValueError):
        Maze(width, height, AVATAR, 0, random.Random(0))