# lifegrid

Conway's Game of Life in a window. Start from a pattern file or from an empty
(or randomly filled) square board, step it by hand or let it run, and switch
cells on and off by dragging with the mouse.

## Install

    pip install .

## Usage

    lifegrid map_file.txt [OPTIONS...]
    lifegrid size [OPTIONS...]

The first argument that does not start with `-` names the board: a
non-negative whole number makes an empty square board of that size, anything
else is read as a pattern file. Further such arguments are ignored.

Run `lifegrid` with no arguments, or with `--help`, to print the list of
options. The list is also printed when no board is named or an option is not
recognised. If the pattern file cannot be opened, the error is printed and the
command exits with status 1.

Examples:

    lifegrid 50 --random --heatmap
    lifegrid pattern.txt --no-grid --cell-size 8

### Pattern files

A pattern file has one row per line, with cells separated by spaces: a
non-zero number is a living cell and `0` a dead one. The first line sets the
width of the board; extra numbers on longer lines are dropped. An empty
border, set by `--blank-cell`, is added around the pattern on every side.

    0 1 0
    0 0 1
    1 1 1

### Options

Numeric options take their value as the next argument or after `=`
(`--cell-size 8` or `--cell-size=8`).

| Option            | Meaning                                        |
|-------------------|------------------------------------------------|
| `--help`          | Display the help message                       |
| `--random`        | Fill the grid randomly (square boards only)    |
| `--heatmap`       | Color cells based on neighbor count            |
| `--no-grid`       | Hide the grid overlay                          |
| `--window-width`  | Set window width in pixels (default 1600)      |
| `--window-height` | Set window height in pixels (default 900)      |
| `--cell-size`     | Set size of each cell in pixels (default 10)   |
| `--blank-cell`    | Set padding around the map (default 100)       |
| `--cell-offset`   | Set inner padding inside each cell (default 1) |
| `--target-fps`    | Set target frames per second (default 10)      |

With `--random`, only the area inside the padding is filled. Grid lines are
drawn only while cells are larger than 5 pixels.

### Controls

| Input              | Action                                  |
|--------------------|-----------------------------------------|
| `Space`            | Advance one generation                  |
| `a`                | Toggle automatic stepping               |
| `Left` / `Right`   | Lower / raise the target frame rate     |
| `Up` / `Down`      | Grow / shrink the cells (1 to 100 px)   |
| `h` `j` `k` `l`    | Move the board left, down, up, right    |
| Left mouse drag    | Switch the cells under the pointer      |
| `q` / `Esc`        | Quit                                    |

The top-left corner of the window shows the target and measured frame rates,
the board size, the cell size and whether the heatmap, automatic stepping and
the grid overlay are on.

## Using it as a library

    from lifegrid.board import load_board

    board = load_board("pattern.txt", padding=10)
    board.step()
    print(sorted(board.living()))

- `lifegrid.board` holds `Board` (with `is_alive`, `set`, `toggle`,
  `count_neighbors`, `step` and `living`) and the helpers `create_board`,
  `parse_board`, `load_board` and `randomize`. The board's edges do not wrap.
- `lifegrid.render` draws a board into an in-memory `Framebuffer` according
  to a `View`, and maps window pixels back to cells with `cell_at`.
- `lifegrid.events.Session` holds the state that keyboard and mouse input
  change; `lifegrid.options.parse_args` turns a command line into a `Config`.
- `lifegrid.app.build_session` builds a drawn session from a `Config`, and
  `lifegrid.app.run` shows it in a window.

## What it does not do

Boards cannot be saved: edits made with the mouse are lost when the window
closes. Patterns are read only from the plain space-separated format above.

## Tests

    pip install .[test]
    pytest