"""ASCII galaxy: frame driver and entry point."""

from __future__ import annotations

import logging
import os
import sys
import time
from typing import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .constants import (  # noqa: E402
    FOOTER_ROWS,
    FPS_LOG_INTERVAL,
    FRAME_DELAY_MS,
    MAX_HEIGHT,
    MAX_WIDTH,
    SIM_DT,
)
from .logging_config import default_log_file, setup_logging  # noqa: E402
from .models.galaxy import FrameSink, Galaxy  # noqa: E402
from .terminal import TerminalError, get_terminal  # noqa: E402

logger = logging.getLogger(__name__)


def galaxy_dimensions(columns: int, rows: int) -> tuple[int, int]:
    """Grid size for a terminal of the given size, leaving room for the footer."""
    width = min(columns, MAX_WIDTH)
    height = min(rows - FOOTER_ROWS, MAX_HEIGHT)
    if width < 1 or height < 1:
        raise TerminalError(f"Terminal of {columns}x{rows} cells is too small to draw in")
    return width, height


class FrameDriver:
    """Fixed-step render/update loop.

    Each iteration renders the current state, advances the simulation by a
    fixed ``dt`` and sleeps for a fixed delay. Wall-clock time only feeds the
    on-screen counter, so the two clocks are free to drift apart.
    """

    def __init__(
        self,
        galaxy: Galaxy,
        out: FrameSink,
        *,
        dt: float = SIM_DT,
        frame_delay_ms: int = FRAME_DELAY_MS,
        sleep: Callable[[int], object] | None = None,
        clock: pygame.time.Clock | None = None,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self.galaxy = galaxy
        self.out = out
        self.dt = dt
        self.frame_delay_ms = frame_delay_ms
        self.sleep = sleep if sleep is not None else pygame.time.wait
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.now = now
        self.frames = 0

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self, should_continue: Callable[[int], bool] | None = None) -> int:
        """Loop until ``should_continue(frames)`` is false, or forever without one.

        Returns the number of frames drawn.
        """
        start = self.now()
        while should_continue is None or should_continue(self.frames):
            self.step(self.now() - start)
        return self.frames

    def step(self, elapsed: float) -> None:
        self.galaxy.render(self.out, elapsed)
        self.galaxy.update(self.dt)
        self.frames += 1

        self.clock.tick()
        if self.frames % FPS_LOG_INTERVAL == 0:
            logger.debug(f"Frame {self.frames}: {self.clock.get_fps():.1f} fps")

        self.sleep(self.frame_delay_ms)


def main() -> None:
    """Entry point for the ascii-galaxy command."""
    # Console output is capped at WARNING, so DEBUG only reaches the file
    setup_logging(logging.DEBUG, log_file=default_log_file())
    terminal = get_terminal()

    try:
        width, height = galaxy_dimensions(*terminal.size())
    except TerminalError as e:
        logger.error(str(e))
        sys.exit(1)

    terminal.hide_cursor()
    terminal.clear()
    logger.info(f"Starting galaxy on a {width}x{height} grid")

    driver = FrameDriver(Galaxy(width, height), terminal)
    try:
        driver.run()
    except KeyboardInterrupt:
        logger.info(f"Interrupted after {driver.frames} frames")
        sys.exit(130)
    finally:
        terminal.show_cursor()


if __name__ == "__main__":
    main()
