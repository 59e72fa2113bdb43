"""
Abstract factory for ducks, with a plain and a counting product line.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError
from .emitter import SoundEmitter, MallardDuck, RedHeadDuck, DuckCall, RubberDuck
from .decorator import CallCounter, CountingEmitter

logger = get_logger(__name__)

_registry: Dict[str, Type['EmitterFactory']] = {}


class EmitterFactory(ABC):
    """Creates one member of each duck family per call."""

    counter: Optional[CallCounter] = None

    @abstractmethod
    def create_mallard_duck(self) -> SoundEmitter:
        pass

    @abstractmethod
    def create_red_head_duck(self) -> SoundEmitter:
        pass

    @abstractmethod
    def create_duck_call(self) -> SoundEmitter:
        pass

    @abstractmethod
    def create_rubber_duck(self) -> SoundEmitter:
        pass


def register_factory(name: str):
    """Decorator for registering a product line under a name."""
    def decorator(cls):
        _registry[name] = cls
        logger.debug(f"Registered {cls.__name__} as '{name}'")
        return cls
    return decorator


def create_factory(name: str, **kwargs) -> EmitterFactory:
    """Create a factory by its registered name."""
    if name not in _registry:
        raise ConfigurationError(
            f"Unknown factory: {name}",
            details={'available_factories': list_factories()}
        )
    return _registry[name](**kwargs)


def list_factories() -> list:
    """List all registered factory names."""
    return sorted(_registry)


@register_factory('plain')
class DuckFactory(EmitterFactory):
    """Plain product line: bare ducks."""

    def create_mallard_duck(self) -> SoundEmitter:
        return MallardDuck()

    def create_red_head_duck(self) -> SoundEmitter:
        return RedHeadDuck()

    def create_duck_call(self) -> SoundEmitter:
        return DuckCall()

    def create_rubber_duck(self) -> SoundEmitter:
        return RubberDuck()


@register_factory('counting')
class CountingDuckFactory(EmitterFactory):
    """Counting product line: every duck comes wrapped in a ``CountingEmitter``."""

    def __init__(self, counter: Optional[CallCounter] = None):
        self.counter = counter if counter is not None else CallCounter()

    def create_mallard_duck(self) -> SoundEmitter:
        return CountingEmitter(MallardDuck(), self.counter)

    def create_red_head_duck(self) -> SoundEmitter:
        return CountingEmitter(RedHeadDuck(), self.counter)

    def create_duck_call(self) -> SoundEmitter:
        return CountingEmitter(DuckCall(), self.counter)

    def create_rubber_duck(self) -> SoundEmitter:
        return CountingEmitter(RubberDuck(), self.counter)
