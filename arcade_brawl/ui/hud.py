"""
HUD System
==========
Health bars, round info, pause overlay, result banner.
"""

import pygame
from typing import Tuple, Optional

from arcade_brawl.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, MAX_HEALTH,
    WHITE, DARK_GRAY, LIGHT_GRAY, RED, BLUE, GOLD,
    HEALTH_GREEN, HEALTH_YELLOW, HEALTH_RED, Side
)
from arcade_brawl.core.match import MatchSnapshot
from arcade_brawl.core.rounds import RoundResult


class HealthBar:
    """
    Health bar dengan animasi smooth dan efek visual.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 is_flipped: bool = False):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.is_flipped = is_flipped

        # Values
        self.current = float(MAX_HEALTH)
        self.target = float(MAX_HEALTH)
        self.max_value = float(MAX_HEALTH)

        # Animation
        self.damage_display = float(MAX_HEALTH)  # Delayed damage bar
        self.damage_delay = 0.0
        self.lerp_speed = 5.0
        self.damage_lerp_speed = 2.0

        # Colors
        self.bg_color = DARK_GRAY
        self.border_color = WHITE
        self.damage_color = RED

    def set_value(self, value: float, max_value: float = MAX_HEALTH):
        """Set health value"""
        self.target = max(0, min(max_value, value))
        self.max_value = max_value

    def update(self, dt: float):
        """Update animation"""
        diff = self.target - self.current
        self.current += diff * min(1.0, self.lerp_speed * dt)

        if self.damage_delay > 0:
            self.damage_delay -= dt
        else:
            diff = self.current - self.damage_display
            self.damage_display += diff * min(1.0, self.damage_lerp_speed * dt)

        # Trigger delay when damage taken
        if self.target < self.damage_display - 1 and self.damage_delay <= 0:
            self.damage_delay = 0.3

    def render(self, surface: pygame.Surface):
        """Render health bar"""
        pygame.draw.rect(surface, self.bg_color,
                         (self.x, self.y, self.width, self.height))

        current_ratio = self.current / self.max_value
        damage_ratio = self.damage_display / self.max_value
        current_width = int(self.width * current_ratio)
        damage_width = int(self.width * damage_ratio)

        if self.is_flipped:
            current_x = self.x + self.width - current_width
            damage_x = self.x + self.width - damage_width
        else:
            current_x = self.x
            damage_x = self.x

        # Damage bar (red, behind health)
        if damage_width > current_width:
            pygame.draw.rect(surface, self.damage_color,
                             (damage_x, self.y, damage_width, self.height))

        if current_width > 0:
            pygame.draw.rect(surface, self._get_health_color(current_ratio),
                             (current_x, self.y, current_width, self.height))

        # Border
        pygame.draw.rect(surface, self.border_color,
                         (self.x, self.y, self.width, self.height), 2)

    def _get_health_color(self, ratio: float) -> Tuple[int, int, int]:
        """Get color based on health ratio"""
        if ratio > 0.6:
            return HEALTH_GREEN
        elif ratio > 0.3:
            return HEALTH_YELLOW
        else:
            return HEALTH_RED


class HUD:
    """
    Main HUD class combining all elements.
    """

    def __init__(self, player_name: str = "PLAYER", cpu_name: str = "CPU"):
        bar_width = 450
        bar_height = 28
        bar_y = 30

        self.player_bar = HealthBar(50, bar_y, bar_width, bar_height, is_flipped=False)
        self.cpu_bar = HealthBar(SCREEN_WIDTH - 50 - bar_width, bar_y,
                                 bar_width, bar_height, is_flipped=True)

        self.player_name = player_name.upper()
        self.cpu_name = cpu_name.upper()
        self.round_count = 1
        self.difficulty = 1.0

        self.name_font = None
        self.info_font = None
        self.banner_font = None

    def _init_fonts(self):
        if self.name_font is None:
            self.name_font = pygame.font.Font(None, 26)
            self.info_font = pygame.font.Font(None, 30)
            self.banner_font = pygame.font.Font(None, 96)

    def update(self, dt: float, snapshot: MatchSnapshot):
        """Update HUD dengan match snapshot"""
        self.player_bar.set_value(snapshot.player.health)
        self.cpu_bar.set_value(snapshot.cpu.health)
        self.round_count = snapshot.round_count
        self.difficulty = snapshot.difficulty

        self.player_bar.update(dt)
        self.cpu_bar.update(dt)

    def render(self, surface: pygame.Surface):
        """Render entire HUD"""
        self._init_fonts()

        panel = pygame.Surface((SCREEN_WIDTH, 90), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 150))
        surface.blit(panel, (0, 0))

        self.player_bar.render(surface)
        self.cpu_bar.render(surface)

        name1 = self.name_font.render(self.player_name, True, RED)
        name2 = self.name_font.render(self.cpu_name, True, BLUE)
        surface.blit(name1, (55, 8))
        surface.blit(name2, (SCREEN_WIDTH - 55 - name2.get_width(), 8))

        info = self.info_font.render(
            f"ROUND {self.round_count}  x{self.difficulty:.1f}", True, WHITE
        )
        surface.blit(info, info.get_rect(center=(SCREEN_WIDTH // 2, 44)))

    def render_pause(self, surface: pygame.Surface):
        """Overlay saat pause"""
        self._init_fonts()
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        surface.blit(overlay, (0, 0))

        text = self.banner_font.render("PAUSED", True, WHITE)
        surface.blit(text, text.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))

        hint = self.info_font.render("ESC / P to resume", True, LIGHT_GRAY)
        surface.blit(hint, hint.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 60)))

    def render_result(self, surface: pygame.Surface, winner: Side,
                      result: Optional[RoundResult] = None):
        """Banner pemenang"""
        self._init_fonts()
        if winner == Side.PLAYER:
            title, color = "YOU WIN!", GOLD
        else:
            title, color = "YOU LOSE", RED

        text = self.banner_font.render(title, True, color)
        surface.blit(text, text.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 40)))

        if result is not None:
            stats = result.player_stats
            line = (f"Hits {stats.get('hits_landed', 0)}  "
                    f"Damage {stats.get('total_damage_dealt', 0)}  "
                    f"Taken {stats.get('total_damage_taken', 0)}")
            summary = self.info_font.render(line, True, WHITE)
            surface.blit(summary, summary.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 20)))
