"""Program entry point: build the board and run the interactive window."""

from __future__ import annotations

import array
import random
import sys
import time
from collections.abc import Sequence

from lifegrid.board import Board, create_board, load_board, randomize
from lifegrid.events import Key, QuitRequested, Session
from lifegrid.options import Config, UsageError, help_text, parse_args
from lifegrid.render import Framebuffer, View

WINDOW_TITLE = "Window"
INFO_COLOR = (255, 255, 255)
INFO_X = 20
INFO_FIRST_Y = 35
INFO_STEP = 15


def build_board(config: Config, rng: random.Random | None = None) -> Board:
    """Create the board named by the configuration."""
    if config.size is not None:
        board = create_board(config.size, config.size, config.blank_cell)
        if config.random:
            randomize(board, config.blank_cell, rng)
        return board
    if config.map_path is not None:
        return load_board(config.map_path, config.blank_cell)
    raise ValueError("configuration names neither a size nor a map file")


def build_session(config: Config, rng: random.Random | None = None) -> Session:
    """Create a drawn session from the configuration."""
    view = View(
        window_width=config.window_width,
        window_height=config.window_height,
        cell_size=config.cell_size,
        cell_offset=config.cell_offset,
        display_grid=config.display_grid,
        heatmap=config.heatmap,
    )
    session = Session(build_board(config, rng), view, config.target_fps)
    session.redraw()
    return session


def _frame_bytes(framebuffer: Framebuffer) -> bytes:
    """Encode the framebuffer as RGBX bytes."""
    words = array.array("I", framebuffer.pixels)
    if sys.byteorder == "little":
        words.byteswap()
    return words.tobytes()[1:] + b"\x00"


def run(session: Session) -> None:
    """Show the session in a window until the user quits."""
    import pygame

    special_keys = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
    }
    size = (session.framebuffer.width, session.framebuffer.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 18)
        limiter = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    session.key_press(special_keys.get(event.key, event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    session.button_press(event.button)
                elif event.type == pygame.MOUSEBUTTONUP:
                    session.button_release(event.button)
                elif event.type == pygame.MOUSEMOTION:
                    session.motion(*event.pos)

            if session.auto_mode and session.clock.tick(time.monotonic(), session.target_fps):
                session.board.step()
                session.redraw()

            image = pygame.image.frombuffer(_frame_bytes(session.framebuffer), size, "RGBX")
            screen.blit(image, (0, 0))
            for index, line in enumerate(session.info_lines()):
                text = font.render(line, True, INFO_COLOR)
                screen.blit(text, (INFO_X, INFO_FIRST_Y + index * INFO_STEP - text.get_height()))
            pygame.display.flip()
            limiter.tick(240)
    except QuitRequested:
        return
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    try:
        config = parse_args(argv)
    except UsageError:
        print(help_text(), end="")
        return 0
    if config.show_help:
        print(help_text(), end="")
        return 0
    try:
        session = build_session(config)
    except OSError as exc:
        print(exc.strerror or str(exc), file=sys.stderr)
        return 1
    run(session)
    return 0