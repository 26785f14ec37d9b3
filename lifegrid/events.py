"""Interactive session state: key, mouse and frame-timing handling."""

from __future__ import annotations

import math
from enum import IntEnum

from lifegrid.board import Board
from lifegrid.render import Framebuffer, View, cell_at, draw_grid

MAX_CELL_SIZE = 100
MIN_CELL_SIZE = 1
MIN_TARGET_FPS = 1
PAN_STEP = 5
LEFT_BUTTON = 1


class Key(IntEnum):
    """Key codes understood by :meth:`Session.key_press`."""

    SPACE = 32
    A = ord("a")
    H = ord("h")
    J = ord("j")
    K = ord("k")
    L = ord("l")
    Q = 113
    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class QuitRequested(Exception):
    """The user asked to close the program."""


class FrameClock:
    """Decides when automatic generations are due and measures the real rate."""

    def __init__(self) -> None:
        self.real_fps = 0
        self._last_frame = 0.0
        self._last_fps_check = 0.0
        self._frame_count = 0

    def tick(self, now: float, target_fps: int) -> bool:
        """Return True when a new generation is due at time ``now`` (seconds)."""
        frame_delay = math.inf if target_fps == 0 else 1.0 / target_fps
        due = now - self._last_frame >= frame_delay
        if due:
            self._last_frame = now
            self._frame_count += 1
        if now - self._last_fps_check >= 1.0:
            self.real_fps = self._frame_count
            self._frame_count = 0
            self._last_fps_check = now
        return due


class Session:
    """A board shown in a window, together with the user's controls."""

    def __init__(self, board: Board, view: View, target_fps: int) -> None:
        self.board = board
        self.view = view
        self.target_fps = target_fps
        self.framebuffer = Framebuffer(view.window_width, view.window_height)
        self.auto_mode = False
        self.left_button = False
        self.clock = FrameClock()
        self._last_cell: tuple[int, int] = (0, 0)

    def redraw(self) -> None:
        """Clear the framebuffer and draw the board again."""
        self.framebuffer.clear()
        draw_grid(self.framebuffer, self.board, self.view)

    def key_press(self, keycode: int) -> None:
        """React to a key; raises QuitRequested for q and Escape."""
        view = self.view
        if keycode in (Key.Q, Key.ESC):
            raise QuitRequested
        if keycode == Key.LEFT:
            if self.target_fps > MIN_TARGET_FPS:
                self.target_fps -= 1
        elif keycode == Key.RIGHT:
            self.target_fps += 1
        elif keycode == Key.SPACE:
            self.board.step()
        elif keycode == Key.A:
            self.auto_mode = not self.auto_mode
        elif keycode == Key.H:
            view.offset_x -= PAN_STEP
        elif keycode == Key.L:
            view.offset_x += PAN_STEP
        elif keycode == Key.K:
            view.offset_y -= PAN_STEP
        elif keycode == Key.J:
            view.offset_y += PAN_STEP
        elif keycode == Key.UP:
            if view.cell_size < MAX_CELL_SIZE:
                view.cell_size += 1
        elif keycode == Key.DOWN:
            if view.cell_size > MIN_CELL_SIZE:
                view.cell_size -= 1
        self.redraw()

    def button_press(self, button: int) -> None:
        """Start dragging when the left button goes down."""
        if button == LEFT_BUTTON:
            self.left_button = True

    def button_release(self, button: int) -> None:
        """Stop dragging when the left button comes up."""
        if button == LEFT_BUTTON:
            self.left_button = False

    def motion(self, x: int, y: int) -> bool:
        """Toggle the cell under a dragging pointer; return True if one changed."""
        if not self.left_button:
            return False
        cell = cell_at(self.board, self.view, x, y)
        if cell is None or cell == self._last_cell:
            return False
        self.board.toggle(*cell)
        self.redraw()
        self._last_cell = cell
        return True

    def info_lines(self) -> list[str]:
        """Return the status lines shown in the window's corner."""
        heatmap = "ON" if self.view.heatmap else "OFF"
        auto = "ON" if self.auto_mode else "OFF"
        overlay = "ON" if self.view.display_grid else "OFF"
        return [
            f"Framerate max: {self.target_fps}",
            f"FPS: {self.clock.real_fps}",
            f"Grid: {self.board.width} x {self.board.height}",
            f"Cell size: {self.view.cell_size}",
            f"Heatmap: {heatmap}",
            f"Auto mode: {auto}",
            f"Grid overlay: {overlay}",
        ]