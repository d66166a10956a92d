from .game_engine import GameEngine, InputState, ScoreEvent, Snapshot, StepEvents
from .settings import PongConfig

__all__ = ["GameEngine", "InputState", "ScoreEvent", "Snapshot", "StepEvents", "PongConfig"]
