import pygame
from .colors import COLORS

def draw_grid(monitor):
    """Draw the board lines, both snakes and the food"""
    cfg = monitor.cfg
    cs = cfg.CELL_SIZE
    side = cfg.GRID_SIZE * cs
    ox, oy = monitor.grid_x, monitor.grid_y

    pygame.draw.rect(monitor.screen, COLORS['GRID_BG'], pygame.Rect(ox, oy, side, side))
    for i in range(cfg.GRID_SIZE + 1):
        pygame.draw.line(monitor.screen, COLORS['GRID_LINE'], (ox + i * cs, oy), (ox + i * cs, oy + side))
        pygame.draw.line(monitor.screen, COLORS['GRID_LINE'], (ox, oy + i * cs), (ox + side, oy + i * cs))

    snap = monitor.sim.snapshot()

    # Snakes: head in the bright shade, body in the dark one
    for snake_id, body in ((1, snap.agent1_body), (2, snap.agent2_body)):
        head_color, body_color = cfg.SNAKE_COLORS[snake_id]
        for index, (x, y) in enumerate(body):
            rect = pygame.Rect(ox + x * cs + 1, oy + y * cs + 1, cs - 2, cs - 2)
            pygame.draw.rect(monitor.screen, head_color if index == 0 else body_color, rect)

    # Food
    for x, y in snap.food_cells:
        center = (ox + x * cs + cs // 2, oy + y * cs + cs // 2)
        pygame.draw.circle(monitor.screen, COLORS['FOOD'], center, max(2, cs // 2 - 2))
