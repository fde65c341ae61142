# mazearcade

A terminal maze game with seven mini-games built in. Find your way from the
top-left corner of a randomly carved maze to the 🏁 flag. Stepping onto a `!!`
square starts a mini-game picked at random, each with equal chance.

The mini-games can also be played on their own:

1. Tic-tac-toe (井字棋)
2. Guess the number (猜数字游戏)
3. Rock, paper, scissors (石头剪刀布)
4. Hangman (Hangman猜词)
5. Sokoban (推箱子)
6. Snake (贪吃蛇)
7. Text adventure (文字冒险)

The game's text is in Chinese, and it uses ANSI colours and emoji, so it needs
a terminal that can show both.

## Installing

```
pip install .
```

## Playing

```
mazearcade
```

Add `--plain` to keep the screen from being cleared and to skip the pauses
between screens:

```
mazearcade --plain
```

Closing the input (Ctrl-D) or pressing Ctrl-C leaves the game with a goodbye
message.

The main menu offers three choices:

- `1` starts the maze game. A quick game picks a random maze size of 11 to 15
  (a grid of 23×23 to 31×31 squares) with low mini-game density. A custom game
  lets you pick the size level (1–5, grids of 23×23 up to 31×31) and the
  mini-game density level (1–3). Then you choose one of five avatars and
  confirm with `1`, or `2` to go back to the settings.
- `2` opens the mini-game list. Pick a game by number, or `0` to go back.
- `3` quits.

In the maze, type one or more of `w`, `a`, `s`, `d` and press Enter to move
up, left, down or right. A line such as `ddss` makes several moves in turn.
Walking into a wall leaves you where you are; any other characters make the
whole line invalid.

### The mini-games

- **Tic-tac-toe**: you are 😊 and move first by typing a square from 1 to 9;
  the computer 🐱 plays a random free square. Rounds repeat until you win.
- **Guess the number**: find a number from 1 to 100; each wrong guess tells
  you whether it is too small or too large and by roughly how much.
- **Rock, paper, scissors**: type `P`, `S` or `R`. A match is five rounds and
  a tie scores a point for both sides. Matches repeat until you win one.
- **Hangman**: guess a five-letter English word one letter at a time. Seven
  wrong letters lose the round.
- **Sokoban**: push both boxes (`B`) onto the targets (`$`) with `w`, `a`,
  `s`, `d`; `q` leaves the game.
- **Snake**: the snake moves on its own once a second; press `w`, `a`, `s` or
  `d` to turn. Eat five pieces of food to win; hitting a wall or yourself ends
  the game.
- **Text adventure**: the commands are `north`, `south`, `east`, `west`,
  `take`, `unlock`, `inventory` and `quit`. Find the key and open the chest.

## Using the pieces from Python

Each mini-game takes a `mazearcade.utils.Console`, which reads lines from one
stream and writes text to another. With `interactive=False` the console does
not clear the screen or pause, so a game can be driven from a script:

```python
import io
from mazearcade.utils import Console
from mazearcade.sokoban import SokobanGame

console = Console(stdin=io.StringIO("q\n"), stdout=io.StringIO(), interactive=False)
SokobanGame(console).play()
```

`Console.read_line` raises `EOFError` once the input runs out. When Snake is
driven this way it does not run in real time: each line read is taken as keys
to turn by, and then the snake moves one square.

The rules live in classes that do no input or output:

- `mazearcade.tictactoe.Board`
- `mazearcade.hangman.HangmanState`
- `mazearcade.sokoban.SokobanBoard`
- `mazearcade.snake.SnakeBoard`
- `mazearcade.text_adventure.Adventure`
- `mazearcade.rock_paper_scissors.round_outcome` and
  `mazearcade.guess_number.hint`

`mazearcade.maze.Maze` builds and renders a maze and moves the player through
it; `mazearcade.manager.MiniGameManager` holds the list of games and starts
them by index or at random.

## What it does not do

There are no saved games, scores or high-score tables: every game starts fresh
and nothing is kept after it ends.

## Running the tests

```
pip install .[test]
pytest
```