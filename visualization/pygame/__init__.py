"""
Pygame-based visualization package for the cooperative snake simulation.

Provides:
    - COLORS (shared color palette)
    - PygameMonitor (window, panel and communication log)
    - format_event (event -> log line)
"""

from .colors import COLORS
from .monitor import PygameMonitor
from .ui_renderer import format_event

__all__ = ["COLORS", "PygameMonitor", "format_event"]
