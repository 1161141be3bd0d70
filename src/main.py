"""Entry point for the Board Recall memory game.

Sets up the game session, input/render systems, and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color

from recall.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from recall.events.bus import EVENT_MOUSE_PRESS
from recall.session import GameSession
from recall.systems.input import InputSystem
from recall.systems.render import RenderSystem
from recall.ui.controls import clear_controls, spawn_controls

logger = logging.getLogger(__name__)


class RecallWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.session = GameSession()
        self.event_bus = self.session.event_bus
        self.world = self.session.world
        spawn_controls(self.world, self.width, self.height)

        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self)

        set_background_color(color.DARK_SLATE_GRAY)

    def on_resize(self, width: int, height: int):
        # Controls are positioned relative to the board, so rebuild them.
        world = getattr(self, "world", None)
        if world is not None:
            clear_controls(world)
            spawn_controls(world, width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.session.tick(delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_close(self):
        super().on_close()
        self.session.dispose()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
    )
    logger.info("Board Recall starting")
    RecallWindow()
    run()

if __name__ == "__main__":
    main()
