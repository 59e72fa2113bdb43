"""
Configuration management for Duck Pond.
"""
from .settings import SimulatorConfig
from .presets import ScenarioPresets

__all__ = [
    'SimulatorConfig',
    'ScenarioPresets',
]
