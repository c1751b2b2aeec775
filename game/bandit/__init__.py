"""Diamond Bandit - arcade arena game engine and Gymnasium environment"""

from .level import LevelState, generate_level
from .machine import GameStateMachine, acknowledge_victory, start_game, update
from .loop import GameLoop, Snapshot
from .controls import InputSample, InputState
from .states import (
    AudioCue,
    LevelTransition,
    MenuState,
    PlayingState,
    VictoryEvent,
    VictoryState,
)
from .bandit_env import DiamondBanditEnv, run_random_episode

__all__ = [
    'LevelState',
    'generate_level',
    'GameStateMachine',
    'start_game',
    'update',
    'acknowledge_victory',
    'GameLoop',
    'Snapshot',
    'InputSample',
    'InputState',
    'AudioCue',
    'LevelTransition',
    'MenuState',
    'PlayingState',
    'VictoryEvent',
    'VictoryState',
    'DiamondBanditEnv',
    'run_random_episode',
]
