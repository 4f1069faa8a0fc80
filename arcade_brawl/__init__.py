"""
Arcade Brawl
============
Player vs CPU fighting game on a simulated millisecond clock.
"""

__version__ = "1.0.0"
