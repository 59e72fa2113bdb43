from .runner import DuckSimulator, SimulationResult, count_emitters

__all__ = [
    'DuckSimulator',
    'SimulationResult',
    'count_emitters'
]
