"""pygame front-end for the falling-block simulator.

Every frame polls the keyboard, updates the piece once and redraws the whole
window.  The loop runs at the fixed frame rate from the configuration; there
is no catching up when a frame takes longer.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from .config import WINDOW_TITLE, GameConfig
from .controls import KEY_DIRECTIONS, Controls
from .engine import Simulation
from .render import BLACK, Renderer, load_sprite
from .timing import FrameTimer

LOGGER = logging.getLogger(__name__)


class GameRunner:
    """Own the window and drive the simulation frame by frame."""

    def __init__(self, config: Optional[GameConfig] = None, simulation: Optional[Simulation] = None) -> None:
        self.config = config or GameConfig()
        self.simulation = simulation or Simulation(self.config)
        self.controls = Controls(self.config.input_mode)
        self.timer = FrameTimer(enabled=self.config.profile)
        self.renderer: Optional[Renderer] = None
        self.frames = 0
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def setup(self) -> None:
        """Open the window.  ``pygame.error`` propagates if that fails."""

        pygame.init()
        screen = pygame.display.set_mode(self.config.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        sprite = None
        if self.config.sprite is not None:
            sprite = load_sprite(self.config.sprite, self.config.box_size)
        self.renderer = Renderer(screen, self.config.box_size, sprite)
        self._clock = pygame.time.Clock()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one event; return ``False`` when the game should quit."""

        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                self.controls.press(direction)
        elif event.type == pygame.KEYUP:
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                self.controls.release(direction)
        return True

    def step(self) -> bool:
        """Update the simulation by one frame."""

        self.frames += 1
        return self.simulation.step(self.controls.take())

    def draw(self) -> None:
        if self.renderer is None:
            return
        self.renderer.render(BLACK, self.simulation.piece, self.simulation.state)
        pygame.display.flip()

    def run(self) -> None:
        """Run the game loop until the window is closed or Escape is pressed."""

        try:
            self.setup()
            LOGGER.info(
                "Game started: %dx%d grid, %d fps, %s input",
                self.config.width,
                self.config.height,
                self.config.fps,
                self.config.input_mode.value,
            )
            self._running = True
            while self._running:
                with self.timer.section("events"):
                    for event in pygame.event.get():
                        if not self.handle_event(event):
                            self.stop()
                            break
                if not self._running:
                    break
                with self.timer.section("update"):
                    self.step()
                with self.timer.section("render"):
                    self.draw()
                if self._clock is not None:
                    self._clock.tick(self.config.fps)
        finally:
            self._running = False
            pygame.quit()
        LOGGER.info(
            "Game stopped after %d frame(s). Score: %d",
            self.frames,
            self.simulation.state.score,
        )
        if self.timer.enabled:
            LOGGER.info("Frame timings: %s", self.timer.format_summary())

    def stop(self) -> None:
        if not self._running:
            LOGGER.debug("Stop ignored: game not running")
            return
        self._running = False


def main(config: Optional[GameConfig] = None) -> None:
    GameRunner(config).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
