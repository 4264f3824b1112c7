"""Creeper chase - evade the creeper, reach the safe house"""

from .entities import Entity, Outcome
from .game import ChaseGame
from .input import Direction, InputState, classify_swipe
from .chase_env import ChaseEnv, greedy_action, run_episode

__all__ = [
    'ChaseEnv', 'ChaseGame', 'Direction', 'Entity', 'InputState', 'Outcome',
    'classify_swipe', 'greedy_action', 'run_episode',
]
