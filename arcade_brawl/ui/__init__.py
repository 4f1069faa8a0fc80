"""
UI System Module
"""

from arcade_brawl.ui.hud import HUD, HealthBar

__all__ = ['HUD', 'HealthBar']
