"""
Main Game Shell for Arcade Brawl
"""

import random
import pygame
from typing import Optional

from arcade_brawl.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GAME_TITLE,
    GameState, Side, DEBUG_FRAMERATE,
    BLACK, WHITE
)
from arcade_brawl.core.state_machine import StateMachine
from arcade_brawl.core.input_handler import InputHandler
from arcade_brawl.core.match import Match
from arcade_brawl.core.rounds import RoundController, RoundResult
from arcade_brawl.fighters.roster import get_profile
from arcade_brawl.graphics.renderer import Renderer
from arcade_brawl.ui.hud import HUD
from arcade_brawl.audio.sound_manager import SoundManager


class Game:
    """
    Window loop: feeds keys into the match, advances its clock by the
    frame delta, draws snapshots and hands rounds over.
    """

    def __init__(self, rounds: RoundController,
                 rng: Optional[random.Random] = None):
        pygame.init()

        # Display
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.dt_ms = 0
        self.fps = 0.0
        self.frame_count = 0

        # Core systems
        self.rounds = rounds
        self.rng = rng or random.Random()
        self.state_machine = StateMachine(GameState.FIGHTING)
        self.input_handler = InputHandler()
        self.sound_manager = SoundManager()

        # Per-match systems
        self.match: Optional[Match] = None
        self.renderer: Optional[Renderer] = None
        self.hud: Optional[HUD] = None
        self.fps_font = None

        self._setup_state_handlers()
        self._start_match()

    def _setup_state_handlers(self):
        """Register handlers for each game state"""
        self.state_machine.register_handlers(
            GameState.FIGHTING,
            update=self._update_fighting
        )
        self.state_machine.register_handlers(
            GameState.PAUSED,
            enter=self._enter_paused,
            exit_handler=self._exit_paused
        )
        self.state_machine.register_handlers(
            GameState.MATCH_END,
            enter=self._enter_match_end,
            update=self._update_match_end
        )

    def _start_match(self):
        """Build a fresh match from the round controller"""
        setup = self.rounds.setup_match()
        player = get_profile(setup.player_id)
        cpu = get_profile(setup.cpu_id)

        self.match = Match(
            setup.player_id, setup.cpu_id, setup.context,
            viewport_width=SCREEN_WIDTH, rng=self.rng
        )
        self.match.combat.on_hit(self.sound_manager.play_hit_event)
        self.match.on_match_end(self._on_match_end)
        self.match.on_round_handoff(self._on_round_handoff)

        self.renderer = Renderer(setup.stage, {
            Side.PLAYER: player.color,
            Side.CPU: cpu.color,
        })
        self.hud = HUD(player.name, cpu.name)

        print(f"[Match] Round {setup.context.round_count}: {player.name} vs "
              f"{cpu.name} at {setup.stage.name} "
              f"(difficulty x{setup.context.difficulty_multiplier:.1f})")

    def run(self):
        """Main game loop"""
        while self.running:
            self.dt_ms = self.clock.tick(FPS)
            self.fps = self.clock.get_fps()
            self.frame_count += 1

            self._handle_events()

            if self.input_handler.should_quit():
                self.running = False
                continue

            self._update()
            self._render()
            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        """Update game logic"""
        if self.input_handler.is_action_just_pressed('pause'):
            if self.state_machine.is_state(GameState.FIGHTING):
                self.state_machine.transition_to(GameState.PAUSED)
            elif self.state_machine.is_state(GameState.PAUSED):
                self.state_machine.transition_to(GameState.FIGHTING)

        if self.input_handler.is_action_just_pressed('mute'):
            muted = self.sound_manager.toggle_mute()
            print(f"[Audio] {'Muted' if muted else 'Unmuted'}")
        if self.input_handler.is_action_just_pressed('debug'):
            self.renderer.debug_hitboxes = not self.renderer.debug_hitboxes

        self.state_machine.update(self.dt_ms)
        self.hud.update(self.dt_ms / 1000.0, self.match.snapshot())

    def _render(self):
        """Render current frame"""
        self.screen.fill(BLACK)
        snapshot = self.match.snapshot()

        self.renderer.render(self.screen, snapshot)
        self.hud.render(self.screen)

        if self.state_machine.is_state(GameState.PAUSED):
            self.hud.render_pause(self.screen)
        elif self.state_machine.is_state(GameState.MATCH_END):
            self.hud.render_result(self.screen, snapshot.winner, self.match.result)

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        if self.fps_font is None:
            self.fps_font = pygame.font.Font(None, 24)
        fps_text = self.fps_font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (10, SCREEN_HEIGHT - 30))

    def _cleanup(self):
        """Clean up resources"""
        self.sound_manager.cleanup()
        pygame.quit()

    # =========================================================================
    # STATE HANDLERS
    # =========================================================================

    def _update_fighting(self, dt_ms: float):
        """Update active fighting"""
        self.match.step(self.input_handler.key_state(), dt_ms)

    def _enter_paused(self):
        self.match.pause()
        self.sound_manager.pause()
        self.sound_manager.play_ui('pause')

    def _exit_paused(self):
        self.sound_manager.unpause()
        self.match.resume()

    def _on_match_end(self, winner: Side):
        self.state_machine.transition_to(GameState.MATCH_END)

    def _enter_match_end(self):
        self.sound_manager.play_ko()

    def _update_match_end(self, dt_ms: float):
        """Wait for the round handoff"""
        self.match.tick(dt_ms)

    def _on_round_handoff(self, result: RoundResult):
        context = self.rounds.advance(result)
        outcome = "won" if result.player_won else "lost"
        print(f"[Match] Player {outcome}; next round {context.round_count} "
              f"(difficulty x{context.difficulty_multiplier:.1f})")

        self._start_match()
        self.state_machine.transition_to(GameState.FIGHTING)
