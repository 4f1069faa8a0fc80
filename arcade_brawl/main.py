#!/usr/bin/env python3
"""
ARCADE BRAWL - Player vs CPU Fighting Game
==========================================
Entry point untuk game.

Jalankan: arcade-brawl  (atau python -m arcade_brawl.main)
"""

import argparse
import os
import random
import sys
from typing import List, Optional

from arcade_brawl.config import GAME_TITLE, DEFAULT_DIFFICULTY
from arcade_brawl.core.rounds import RoundContext, RoundController
from arcade_brawl.fighters.roster import ROSTER, DEFAULT_PLAYER_ID

SEED_ENV = 'ARCADE_BRAWL_SEED'

EPILOG = """Environment:
  {seed_env}  Seed for the CPU and opponent picks

Controls:
  Left / Right  - Walk (tap or hold)
  Up            - Jump (with Left/Right for a directional jump)
  Down          - Duck (hold)
  D             - Punch
  A             - Kick (in the air: jump kick)
  S             - Defence
  ESC / P       - Pause
  M             - Mute
  F1            - Show hitboxes
  Q             - Quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='arcade-brawl',
        description="Arcade Brawl - Player vs CPU Fighting Game",
        epilog=EPILOG.format(seed_env=SEED_ENV),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--player', choices=list(ROSTER), default=DEFAULT_PLAYER_ID,
                        help=f'Fighter to play as (default: {DEFAULT_PLAYER_ID})')
    parser.add_argument('--difficulty', type=float, default=DEFAULT_DIFFICULTY,
                        help='Starting CPU difficulty, >= 1.0')
    parser.add_argument('--round', type=int, default=1,
                        help='Starting round number, >= 1')
    return parser


def read_seed() -> Optional[int]:
    """Seed dari environment, None jika tidak di-set"""
    raw = os.environ.get(SEED_ENV, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"[Config] Ignoring non-integer {SEED_ENV}={raw!r}")
        return None


def main(argv: Optional[List[str]] = None):
    """Entry point utama"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        context = RoundContext(round_count=args.round,
                               difficulty_multiplier=args.difficulty)
    except ValueError as e:
        parser.error(str(e))

    print(f"\n{'='*60}")
    print(f"  {GAME_TITLE}")
    print(f"{'='*60}\n")
    print("Memuat game...")

    # Import pygame-side systems late so --help works without a display
    from arcade_brawl.core.game import Game

    seed = read_seed()
    rng = random.Random(seed)
    rounds = RoundController(args.player, context, rng=rng)

    if seed is not None:
        print(f"Seed: {seed}")

    print("\nGame siap!")
    print("Arrows = Gerak | D = Punch | A = Kick | S = Defence | ESC = Pause\n")

    try:
        game = Game(rounds, rng=rng)
        game.run()
    except KeyboardInterrupt:
        print("\nGame dihentikan oleh user.")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
