"""
Predefined simulator scenarios, one per stage of the duck story.
"""
from typing import Any, Callable, Dict
from utils.exceptions import ConfigurationError


class ScenarioPresets:
    """Collection of predefined scenario configurations."""

    @staticmethod
    def basic() -> Dict[str, Any]:
        """Four plain ducks, no goose, no counting, nobody watching."""
        return {
            'factory': 'plain',
            'include_goose': False,
            'mallard_flock_size': 0,
            'observe': False
        }

    @staticmethod
    def decorated() -> Dict[str, Any]:
        """The goose joins in and every duck is counted."""
        return {
            'factory': 'counting',
            'include_goose': True,
            'mallard_flock_size': 0,
            'observe': False
        }

    @staticmethod
    def factory() -> Dict[str, Any]:
        """Counted ducks come from the counting factory only."""
        return {
            'factory': 'counting',
            'include_goose': False,
            'mallard_flock_size': 0,
            'observe': False
        }

    @staticmethod
    def flock() -> Dict[str, Any]:
        """Ducks managed as a flock with a nested flock of mallards."""
        return {
            'factory': 'counting',
            'include_goose': False,
            'mallard_flock_size': 3,
            'observe': False
        }

    @staticmethod
    def observed() -> Dict[str, Any]:
        """The whole flock, with a quackologist watching."""
        return {
            'factory': 'counting',
            'include_goose': True,
            'mallard_flock_size': 3,
            'observe': True
        }

    @classmethod
    def names(cls) -> list:
        """Names of all presets."""
        return sorted(_PRESETS)

    @classmethod
    def get(cls, name: str) -> Dict[str, Any]:
        """Return the preset called ``name``."""
        if name not in _PRESETS:
            raise ConfigurationError(
                f"Unknown preset: {name}",
                details={'available_presets': cls.names()}
            )
        return _PRESETS[name]()


_PRESETS: Dict[str, Callable[[], Dict[str, Any]]] = {
    'basic': ScenarioPresets.basic,
    'decorated': ScenarioPresets.decorated,
    'factory': ScenarioPresets.factory,
    'flock': ScenarioPresets.flock,
    'observed': ScenarioPresets.observed,
}
