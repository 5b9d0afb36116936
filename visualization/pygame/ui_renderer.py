import pygame
from coopsnake.entities import EventKind
from .colors import COLORS


def format_event(event):
    """Human-readable log line for one simulation event"""
    name = f"Snake {event.agent_id}"
    if event.kind == EventKind.TARGETING_FOOD:
        x, y = event.detail
        if event.yielded:
            return f"{name}: Going for food at ({x}, {y})"
        return f"{name}: Targeting nearest food at ({x}, {y})"
    if event.kind == EventKind.FOLLOWING_TAIL:
        return f"{name}: Following my tail, optimizing space"
    if event.kind == EventKind.ATE_FOOD:
        return f"{name}: Ate food! Score +1"
    return f"Game Over! {name} crashed!"


def draw_header(monitor):
    x, y = monitor.panel_x, monitor.grid_y
    score = monitor.sim.score
    monitor.screen.blit(monitor.fonts['title'].render("Collaborative Snake Game", True, COLORS['UI_TEXT']), (x, y))
    monitor.screen.blit(monitor.fonts['large'].render(f"Score: {score}", True, COLORS['UI_TEXT']), (x, y + 40))

    # legend
    for i, snake_id in enumerate((1, 2)):
        head_color, _ = monitor.cfg.SNAKE_COLORS[snake_id]
        cy = y + 80 + i * 24
        pygame.draw.circle(monitor.screen, head_color, (x + 8, cy + 8), 7)
        label = monitor.fonts['medium'].render(f"Snake {snake_id}", True, head_color)
        monitor.screen.blit(label, (x + 22, cy))


def draw_game_over(monitor):
    if not monitor.sim.terminal:
        return
    text = f"Game Over! Final Score: {monitor.sim.score}"
    surf = monitor.fonts['large'].render(text, True, COLORS['UI_GAME_OVER'])
    monitor.screen.blit(surf, (monitor.panel_x, monitor.grid_y + 140))


def draw_buttons(monitor):
    monitor.buttons['reset']['text'] = "Play Again" if monitor.sim.terminal else "Reset Game"
    for button in monitor.buttons.values():
        color = button['hover_color'] if button['rect'].collidepoint(monitor.mouse_pos) else button['color']
        pygame.draw.rect(monitor.screen, color, button['rect'], border_radius=5)
        text_surface = monitor.fonts['medium'].render(button['text'], True, COLORS['UI_TEXT'])
        text_rect = text_surface.get_rect(center=button['rect'].center)
        monitor.screen.blit(text_surface, text_rect)


def draw_log(monitor):
    rect = pygame.Rect(monitor.panel_x, monitor.log_y, monitor.panel_width, 150)
    pygame.draw.rect(monitor.screen, COLORS['UI_PANEL'], rect, border_radius=5)

    title = monitor.fonts['medium'].render("Communication Log:", True, COLORS['UI_TEXT'])
    monitor.screen.blit(title, (rect.x + 10, rect.y + 10))

    y_offset = 36
    for snake_id, line in monitor.log:
        color = COLORS['SNAKE1_TEXT'] if snake_id == 1 else COLORS['SNAKE2_TEXT']
        monitor.screen.blit(monitor.fonts['small'].render(line, True, color), (rect.x + 10, rect.y + y_offset))
        y_offset += 20
