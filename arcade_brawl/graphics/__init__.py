"""
Graphics System Module

Renderer is imported from graphics.renderer directly so that stage data
stays importable without pygame.
"""

from arcade_brawl.graphics.stages import Stage, STAGES, pick_stage

__all__ = ['Stage', 'STAGES', 'pick_stage']
