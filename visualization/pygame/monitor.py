import pygame
from collections import deque
from .colors import COLORS
from .grid_renderer import draw_grid
from .ui_renderer import (
    format_event,
    draw_header,
    draw_game_over,
    draw_buttons,
    draw_log,
)
from .event_handler import handle_events


class PygameMonitor:
    def __init__(self, sim, cfg):
        self.sim = sim
        self.cfg = cfg

        # --- Initialize pygame ---
        pygame.init()
        self.grid_x, self.grid_y = 20, 20
        self.grid_px = cfg.GRID_SIZE * cfg.CELL_SIZE
        self.panel_x = self.grid_x + self.grid_px + 20
        self.panel_width = 420
        self.width = self.panel_x + self.panel_width + 20
        self.height = max(self.grid_px + 40, 420)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Collaborative Snake Game")

        # Fonts
        self.fonts = {
            "small": pygame.font.Font(None, 20),
            "medium": pygame.font.Font(None, 24),
            "large": pygame.font.Font(None, 30),
            "title": pygame.font.Font(None, 36),
        }
        self.log_y = self.grid_y + 240

        # UI state
        self.is_paused = False
        self.should_stop = False
        self.mouse_pos = (0, 0)

        # (snake_id, text) pairs, newest last
        self.log = deque(maxlen=cfg.LOG_LINES)

        self.buttons = self._init_buttons()

        # FPS control
        self.fps_clock = pygame.time.Clock()
        self.fps = 60

    # ---------- Initialization helpers ----------

    def _init_buttons(self):
        button_width, button_height = 140, 40
        button_y = self.grid_y + 180
        return {
            "reset": {
                "rect": pygame.Rect(self.panel_x, button_y, button_width, button_height),
                "text": "Reset Game",
                "color": COLORS["UI_BUTTON"],
                "hover_color": COLORS["UI_BUTTON_HOVER"],
                "action": "reset",
            },
            "pause_play": {
                "rect": pygame.Rect(self.panel_x + button_width + 20, button_y, button_width, button_height),
                "text": "Pause",
                "color": COLORS["UI_BUTTON"],
                "hover_color": COLORS["UI_BUTTON_HOVER"],
                "action": "toggle_pause",
            },
        }

    # ---------- Main loop ----------

    def record(self, result):
        """Append the events of one tick to the communication log"""
        for event in result.events:
            self.log.append((event.agent_id, format_event(event)))

    def render(self):
        """Draw one frame; returns False once the window should close"""
        if not handle_events(self):
            return False

        self.screen.fill(COLORS["UI_BACKGROUND"])
        draw_grid(self)
        draw_header(self)
        draw_game_over(self)
        draw_buttons(self)
        draw_log(self)

        pygame.display.flip()
        self.fps_clock.tick(self.fps)
        return True

    # ---------- Utility ----------

    def should_continue(self):
        return not self.should_stop

    def cleanup(self):
        pygame.quit()
