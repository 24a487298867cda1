"""Simulation module for Yams."""
from .game_simulator import GameSimulator, SimulationConfig, SimulationResult

__all__ = [
    "GameSimulator",
    "SimulationConfig",
    "SimulationResult",
]
