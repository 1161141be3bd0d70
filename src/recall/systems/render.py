from esper import World

from recall.components.round_state import RoundState
from recall.components.score import ScoreReport
from recall.rendering.board_renderer import BoardRenderer
from recall.rendering.panel_renderer import PanelRenderer
from recall.utils.board_view import visible_tokens
from recall.utils.round_state import optional_component


class RenderSystem:
    def __init__(self, world: World, window):
        self.world = world
        self.window = window
        self._board_renderer = BoardRenderer(world, window)
        self._panel_renderer = PanelRenderer(world, window)

    def process(self):
        # Nothing to draw once the session has been disposed.
        if optional_component(self.world, RoundState) is None:
            return
        # Local import keeps tests headless without creating a window.
        import arcade

        report = optional_component(self.world, ScoreReport)
        self._board_renderer.render(arcade, visible_tokens(self.world), report)
        self._panel_renderer.render(arcade)
