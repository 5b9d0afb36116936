COLORS = {
    # Board
    'GRID_BG': (0, 0, 0),
    'GRID_LINE': (34, 34, 34),      # #222222

    # Food
    'FOOD': (255, 0, 0),

    # Log tint per snake
    'SNAKE1_TEXT': (0, 255, 0),
    'SNAKE2_TEXT': (0, 255, 255),

    # UI elements
    'UI_BACKGROUND': (17, 17, 17),
    'UI_PANEL': (34, 34, 34),        # log panel
    'UI_BORDER': (68, 68, 68),       # #444
    'UI_TEXT': (255, 255, 255),
    'UI_BUTTON': (68, 68, 68),
    'UI_BUTTON_HOVER': (90, 90, 90),
    'UI_PAUSE': (144, 238, 144),     # Light green
    'UI_GAME_OVER': (255, 0, 0),
}
