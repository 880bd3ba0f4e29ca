"""
Main game application with PyGame window
"""

import logging

import pygame

from pixel_breakout.core.physics import Simulation
from pixel_breakout.gui.input import InputManager
from pixel_breakout.gui.pygame_font import PygameGlyphProvider
from pixel_breakout.render.canvas import Canvas
from pixel_breakout.render.scene import DebugOverlay
from pixel_breakout.utils.config import game_config

logger = logging.getLogger(__name__)


class BreakoutApp:
    """Frame loop: poll input, tick, draw into the canvas, present"""

    def __init__(self, font_path: str | None = None) -> None:
        pygame.init()

        self.width = game_config.WIDTH
        self.height = game_config.HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(game_config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.canvas = Canvas.blank(self.width, self.height, game_config.BACKGROUND_COLOR)
        self.simulation = Simulation()
        self.input_manager = InputManager(self.simulation)
        self.overlay = DebugOverlay(PygameGlyphProvider(font_path))

        self.show_debug = game_config.DEBUG_OVERLAY
        self.running = True
        self.frame_count = 0

        logger.info("Window %dx%d at %d FPS", self.width, self.height, game_config.FPS)

    def handle_event(self, event: pygame.event.Event) -> None:
        # Key releases are not delivered once the window is in the background
        if event.type == pygame.WINDOWFOCUSLOST:
            self.input_manager.release_all()
            return

        action = self.input_manager.handle_event(event)

        if action == "quit":
            self.running = False
        elif action == "toggle_debug":
            self.show_debug = not self.show_debug
        elif action == "reset":
            self.simulation.reset()
            self.input_manager.sync_direction()
            logger.info("Simulation reset")

    def update(self) -> None:
        self.simulation.tick()

    def render(self) -> None:
        overlay = self.overlay if self.show_debug else None
        self.simulation.draw(self.canvas, overlay)

    def present(self) -> None:
        """Copies the canvas to the window and waits for the next frame"""
        frame = pygame.image.frombuffer(
            self.canvas.to_rgb_array().tobytes(), (self.width, self.height), "RGB"
        )
        self.screen.blit(frame, (0, 0))
        pygame.display.flip()
        self.clock.tick(game_config.FPS)

    def run(self, max_frames: int | None = None) -> None:
        """Main application loop, until the window closes or max_frames is reached"""
        logger.info("Starting Pixel Breakout...")

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.update()
                self.render()
                self.present()

                self.frame_count += 1
                if max_frames is not None and self.frame_count >= max_frames:
                    self.running = False
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        pygame.quit()
        logger.info("Pixel Breakout closed after %d frames.", self.frame_count)
