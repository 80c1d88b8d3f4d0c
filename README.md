# draughtsboard

A draughts (checkers) game on an 8x8 board. You can play against the computer,
or two people can take turns with the same mouse.

## Installing

```
pip install draughtsboard
```

The game window is drawn with pygame.

## Playing

```
draughtsboard
```

Options:

- `--level easy|hard`: how strong the computer opponent is (default `easy`).
- `--frames N`: close the window after `N` frames.

When the game opens you see the main menu:

- **1**: singleplayer. You play White and the computer plays Black.
- **2**: multiplayer. Two people take turns on the same board.
- **Escape**: quit.

During a game:

- Left-click one of your pawns to select it. The squares it can step to turn
  green, and the squares it can capture into turn red.
- Click a highlighted square to move there. Click the selected pawn again to
  deselect it.
- Capturing is compulsory. If any of your pawns can capture, one of them is
  selected for you. After a capture, the same pawn stays selected while it can
  capture again.
- A pawn that reaches the top or bottom row becomes a queen, shown with a pink
  ring. A queen moves any distance along a diagonal.
- **Escape** pauses the game. Press **Enter** to go back to the game, or
  **Escape** again to return to the main menu.

The game ends when one side has no pieces left, and a game-over screen names
the winner.

On the `easy` level the computer picks a random capture if it has one, and a
random step otherwise. On the `hard` level it tries each of its legal moves,
scores the resulting position with `Ai.evaluate_board`, and plays the move
with the highest score.

## Using it as a library

The rules do not depend on the window, so you can use them on their own:

```python
from draughtsboard.board import Board
from draughtsboard.beatings import legal_moves, where_is_beating_available
from draughtsboard.ai import Ai, Level

board = Board()
board.fill_pawns()

for pawn in board.pawns():
    print(pawn.cell(), legal_moves(pawn, board))

ai = Ai(Level.EASY)
ai.move(board)
```

- `draughtsboard.pawn`: `Color` (`WHITE`, `BLACK`) and `Pawn`, whose
  `position` is the pixel centre of its cell (cells are 100 pixels wide).
- `draughtsboard.board`: `Board`, with `at`, `place`, `remove`, `pawns` and
  `fill_pawns` for the starting position.
- `draughtsboard.beatings`: `legal_moves`, `where_is_beating_available`,
  `multiple_beatings` and `is_inside_board`.
- `draughtsboard.ai`: `Ai` and `Level` (`EASY`, `HARD`). `Ai` also takes a
  `random.Random` instance, so its choices can be made repeatable.
- `draughtsboard.game`: `Game` holds a whole session: the menu, pause and
  game-over screens, whose turn it is, and the selected pawn. It takes input
  through `handle_key` and `handle_click`, and `update` moves it forward by
  one frame.
- `draughtsboard.app`: `run(game, max_frames)` opens the window and runs the
  frame loop; `main` is the command above.

## What it does not do

There is no way to save or load a game, no move history or undo, and no
network play. A draw is never declared: a game runs until one side has no
pieces left.