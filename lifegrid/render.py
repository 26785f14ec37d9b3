"""Drawing the board into an in-memory pixel buffer."""

from __future__ import annotations

from dataclasses import dataclass

from lifegrid.board import Board

DEFAULT_WINDOW_WIDTH = 1600
DEFAULT_WINDOW_HEIGHT = 900
DEFAULT_CELL_SIZE = 10
DEFAULT_CELL_OFFSET = 1

CELL_COLOR = 0xF0F0F0
GRID_COLOR = 0xA0A0A0
BACKGROUND_COLOR = 0x000000
SMALL_CELL_LIMIT = 5


class Framebuffer:
    """A width x height grid of 0xRRGGBB pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"framebuffer dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [BACKGROUND_COLOR] * (width * height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; coordinates outside the buffer are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def get_pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} buffer")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        self.pixels[:] = [BACKGROUND_COLOR] * (self.width * self.height)


@dataclass
class View:
    """How the board is placed and styled in the window."""

    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    cell_offset: int = DEFAULT_CELL_OFFSET
    display_grid: bool = True
    heatmap: bool = False
    offset_x: int = 0
    offset_y: int = 0


def _half(value: int) -> int:
    """Halve, rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def heatmap_color(neighbors: int) -> int:
    """Blue for no neighbours through to red for eight."""
    neighbors = max(0, min(8, neighbors))
    red = (255 * neighbors) // 8
    blue = (255 * (8 - neighbors)) // 8
    return (red << 16) | blue


def grid_size(board: Board, view: View) -> tuple[int, int]:
    """Return the grid's (width, height) in pixels."""
    return board.width * view.cell_size, board.height * view.cell_size


def grid_origin(board: Board, view: View) -> tuple[int, int]:
    """Return the pixel position of the grid's top-left corner."""
    width, height = grid_size(board, view)
    return (
        _half(view.window_width - width + view.offset_x),
        _half(view.window_height - height + view.offset_y),
    )


def draw_line(
    framebuffer: Framebuffer, start: tuple[int, int], end: tuple[int, int], color: int
) -> None:
    """Draw a line from ``start`` to ``end``; non-vertical lines run left to right."""
    (x1, y1), (x2, y2) = start, end
    dx = x2 - x1
    dy = y2 - y1
    if dx == 0:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            framebuffer.put_pixel(x1, y, color)
        return
    slope = dy / dx
    for x in range(x1, x2 + 1):
        framebuffer.put_pixel(x, int(slope * (x - x1) + y1), color)


def fill_cell(framebuffer: Framebuffer, view: View, x: int, y: int, color: int) -> None:
    """Paint the inside of the cell whose top-left corner is at (x, y)."""
    if view.cell_size <= SMALL_CELL_LIMIT:
        span = range(1, view.cell_size + 1)
    else:
        span = range(view.cell_offset, view.cell_size - view.cell_offset + 2)
    for i in span:
        for j in span:
            framebuffer.put_pixel(x + j, y + i, color)


def draw_grid(framebuffer: Framebuffer, board: Board, view: View) -> None:
    """Draw live cells and, if enabled, the grid lines."""
    width, height = grid_size(board, view)
    origin_x, origin_y = grid_origin(board, view)

    for cx, cy in board.living():
        color = heatmap_color(board.count_neighbors(cx, cy)) if view.heatmap else CELL_COLOR
        fill_cell(
            framebuffer,
            view,
            origin_x + cx * view.cell_size,
            origin_y + cy * view.cell_size,
            color,
        )

    if not view.display_grid or view.cell_size <= SMALL_CELL_LIMIT:
        return

    for column in range(board.width + 1):
        x = origin_x + column * view.cell_size
        draw_line(framebuffer, (x, origin_y), (x, origin_y + height), GRID_COLOR)
    for row in range(board.height + 1):
        y = origin_y + row * view.cell_size
        draw_line(framebuffer, (origin_x, y), (origin_x + width, y), GRID_COLOR)


def cell_at(board: Board, view: View, x: int, y: int) -> tuple[int, int] | None:
    """Return the cell under pixel (x, y), or None when it lies outside the grid."""
    width, height = grid_size(board, view)
    origin_x, origin_y = grid_origin(board, view)
    if not (origin_x <= x < origin_x + width and origin_y <= y < origin_y + height):
        return None
    return (x - origin_x) // view.cell_size, (y - origin_y) // view.cell_size