"""
AI System Module
"""

from arcade_brawl.ai.controller import AIController
from arcade_brawl.ai.policy import (
    CpuObservation, CpuDecision, decide_movement, decide_reaction,
    reaction_time_ms
)

__all__ = [
    'AIController', 'CpuObservation', 'CpuDecision',
    'decide_movement', 'decide_reaction', 'reaction_time_ms'
]
