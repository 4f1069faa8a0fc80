"""
Main Renderer
=============
Menggambar stage dan kedua fighter dari MatchSnapshot.
Fighter digambar sebagai bentuk datar, tanpa sprite.
"""

import pygame
from typing import Dict, Optional, Tuple

from arcade_brawl.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FLOOR_Y, JUMP_HEIGHT,
    FIGHTER_WIDTH, FIGHTER_HEIGHT, ATTACK_DATA, ATTACK_BY_STATE,
    WHITE, HIT_FLASH, DEFENCE_TINT, DEBUG_HITBOXES,
    FighterState, Side
)
from arcade_brawl.core.match import MatchSnapshot
from arcade_brawl.fighters.fighter import FighterSnapshot
from arcade_brawl.fighters.hitbox import collision_box
from arcade_brawl.graphics.stages import Stage

Color = Tuple[int, int, int]

DUCK_HEIGHT = FIGHTER_HEIGHT * 3 // 5
LIMB_THICKNESS = 18


class Renderer:
    """
    Main renderer untuk game.
    """

    def __init__(self, stage: Stage, colors: Dict[Side, Color]):
        self.stage = stage
        self.colors = colors

        # Background surface (cached)
        self._background: Optional[pygame.Surface] = None

        # Debug
        self.debug_hitboxes = DEBUG_HITBOXES

    def _create_background(self) -> pygame.Surface:
        """Gradient langit + lantai"""
        surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        top, bottom = self.stage.sky_top, self.stage.sky_bottom

        for y in range(FLOOR_Y):
            t = y / FLOOR_Y
            color = tuple(int(top[i] + (bottom[i] - top[i]) * t) for i in range(3))
            pygame.draw.line(surface, color, (0, y), (SCREEN_WIDTH, y))

        pygame.draw.rect(surface, self.stage.floor,
                         (0, FLOOR_Y, SCREEN_WIDTH, SCREEN_HEIGHT - FLOOR_Y))
        pygame.draw.line(surface, self.stage.floor_line,
                         (0, FLOOR_Y), (SCREEN_WIDTH, FLOOR_Y), 3)
        return surface

    def render(self, surface: pygame.Surface, snapshot: MatchSnapshot):
        """
        Render complete game frame.
        """
        if self._background is None:
            self._background = self._create_background()
        surface.blit(self._background, (0, 0))

        for fighter in (snapshot.player, snapshot.cpu):
            self._render_fighter(surface, fighter, snapshot)

        if self.debug_hitboxes:
            self._render_debug_hitboxes(surface, snapshot)

    def _render_fighter(self, surface: pygame.Surface,
                        fighter: FighterSnapshot, snapshot: MatchSnapshot):
        """Render single fighter"""
        base_color = self.colors.get(fighter.side, WHITE)
        if fighter.is_hit:
            color = HIT_FLASH
        elif fighter.state == FighterState.DEFENCE:
            color = DEFENCE_TINT
        else:
            color = base_color

        # Shadow
        shadow_width = FIGHTER_WIDTH * 0.8
        shadow = pygame.Surface((int(shadow_width), 10), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow, (0, 0, 0, 80), (0, 0, shadow_width, 10))
        surface.blit(shadow, (fighter.center_x - shadow_width // 2, FLOOR_Y - 5))

        # Body
        height = DUCK_HEIGHT if fighter.state == FighterState.DUCK else FIGHTER_HEIGHT
        lift = JUMP_HEIGHT if fighter.state in (FighterState.JUMP, FighterState.JUMP_KICK) else 0

        # Walk bob
        if fighter.is_walking and fighter.state == FighterState.IDLE:
            lift += 4 if (snapshot.time_ms // 150) % 2 else 0

        body = pygame.Rect(0, 0, FIGHTER_WIDTH // 2, height)
        body.midbottom = (int(fighter.center_x), FLOOR_Y - lift)
        pygame.draw.rect(surface, color, body, border_radius=8)

        # Head
        head_center = (body.centerx, body.top - 22)
        pygame.draw.circle(surface, color, head_center, 22)

        # Eye marks the facing direction
        eye_dx = -10 if fighter.facing_left else 10
        pygame.draw.circle(surface, (20, 20, 20),
                           (head_center[0] + eye_dx, head_center[1] - 4), 4)

        self._render_limb(surface, fighter, body, color)

    def _render_limb(self, surface: pygame.Surface, fighter: FighterSnapshot,
                     body: pygame.Rect, color: Color):
        """Tangan/kaki yang menjulur saat menyerang"""
        kind = ATTACK_BY_STATE.get(fighter.state)
        if kind is None:
            return

        direction = -1 if fighter.facing_left else 1
        length = ATTACK_DATA[kind].reach - FIGHTER_WIDTH // 4
        if fighter.state == FighterState.PUNCH:
            y = body.top + body.height // 4
        else:
            y = body.top + body.height * 2 // 3

        start_x = body.centerx
        end_x = start_x + direction * length
        pygame.draw.line(surface, color, (start_x, y), (end_x, y), LIMB_THICKNESS)

    def _render_debug_hitboxes(self, surface: pygame.Surface,
                               snapshot: MatchSnapshot):
        """Render collision box dan jarak center"""
        for fighter in (snapshot.player, snapshot.cpu):
            box = collision_box(fighter.center_x, fighter.side)
            pygame.draw.rect(surface, (0, 255, 0),
                             (box.left, FLOOR_Y - FIGHTER_HEIGHT, box.width, FIGHTER_HEIGHT), 2)

        y = FLOOR_Y - FIGHTER_HEIGHT - 60
        x1, x2 = snapshot.player.center_x, snapshot.cpu.center_x
        pygame.draw.line(surface, WHITE, (x1, y), (x2, y), 2)

        font = pygame.font.Font(None, 24)
        text = font.render(f"{int(abs(x2 - x1))}px", True, WHITE)
        surface.blit(text, ((x1 + x2) / 2 - text.get_width() // 2, y - 20))
