# termtetris

A falling-block puzzle game that runs in a POSIX terminal using ANSI escape
sequences. Alongside the usual pieces there is an explosive piece, drawn as
`@`, that clears a 5×5 area where it lands. Every five cleared lines raise the
level and make pieces fall faster. Scores are appended to a ranking file, and
the five best are shown from the main menu.

## Installing

```
pip install .
```

Music and sound effects are played through `pygame`. If the mixer cannot be
opened, a message is written to standard error and the game runs without
sound. Missing sound files are simply skipped.

## Playing

```
termtetris
```

By default the game looks for its files in `./assets`. Another directory can
be given with `--assets`:

```
termtetris --assets /path/to/assets
```

The assets directory holds:

- `ascii-arts/mapa.txt`: the playing field. Spaces are empty cells; any other
  character is a fixed block. Every line must have the same width, at most 40
  columns and 24 lines. `|` marks walls and `-` marks the floor.
- `ranking.txt`: the ranking, one `name | score` entry per line. Each finished
  game appends an entry.
- `musicas/`: `tetris.ogg`, `gameover.ogg`, `clear.wav`, `levelup.wav`,
  `drop.wav` and `explosion.wav`.

If the map cannot be read or is malformed, the game prints an error and exits
with status 1.

### Menu

The title screen is shown for three seconds, then an option is read as a line
of input (type the number and press ENTER):

1. Start a game. You are asked for your name first (at most 29 characters).
2. Show the five best scores from the ranking.
3. Quit.

After a game ends, or from the ranking screen, enter `0` to go back to the
menu. End of input or Ctrl-C on the menu also quits.

### Controls

| Key | Action     |
|-----|------------|
| `a` | move left  |
| `d` | move right |
| `s` | move down  |
| `w` | rotate     |

Keys work in upper or lower case. Holding `w` rotates only once; release it to
rotate again.

### Rules

- A piece falls one row every 1000 ms at level 1. Each new level takes 100 ms
  off that, down to 100 ms.
- A new level is reached for every five lines cleared in total.
- Each piece that lands gives 25 points, plus 75 for every line it clears.
- The explosive piece instead costs 50 points; the score never drops below
  zero. Its blast empties a 5×5 area inside the field, sparing walls and floor.
- The game ends when a new piece has no room to appear.

## Using the modules

The pieces of the game can be used on their own:

- `termtetris.board.Board`: `load`, `from_lines` and `blank` build a board;
  `fits`, `place`, `explode`, `clear_full_lines` and `draw` play on it.
  Malformed maps raise `MapError`.
- `termtetris.tetrominoes`: the `TETROMINOES` table, `rotate` and
  `random_piece`.
- `termtetris.scoring`: `update_score`, `save_score`, `load_scores` and
  `rank_players`.
- `termtetris.game`: `level_up`, `ActivePiece`, `Keys` and the `Game` loop.
- `termtetris.screen.Screen`, `termtetris.keyboard.Keyboard` and
  `termtetris.timer.Timer` for terminal output, raw key input and timing.

## What it does not include

The package does not ship the assets directory. You provide the map, the
sound files and, optionally, an existing ranking file. Input relies on
`termios`, so the game runs only on POSIX terminals.

## Running the tests

```
pip install .[test]
pytest
```