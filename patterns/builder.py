"""
Builder for assembling flocks step by step.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, List
from utils.logging_config import get_logger
from .composite import Flock
from .emitter import SoundEmitter
from .observer import Observer

logger = get_logger(__name__)


class Builder(ABC):
    """Abstract builder base class."""

    @abstractmethod
    def reset(self):
        """Reset the builder."""
        pass

    @abstractmethod
    def build(self) -> Any:
        """Build and return the final product."""
        pass


class FlockBuilder(Builder):
    """Fluent builder for ``Flock`` trees."""

    def __init__(self, name: str = "Flock"):
        self.name = name
        self.reset()
        self.logger = get_logger(self.__class__.__name__)

    def reset(self):
        """Reset the builder state."""
        self._members: List[SoundEmitter] = []
        self._observers: List[Observer] = []
        return self

    def add_emitter(self, emitter: SoundEmitter):
        """Add a single emitter."""
        self._members.append(emitter)
        return self

    def add_emitters(self, create: Callable[[], SoundEmitter], count: int):
        """Add ``count`` emitters, each made by a fresh call to ``create``."""
        for _ in range(count):
            self._members.append(create())
        return self

    def add_flock(self, flock: Flock):
        """Nest an already built flock."""
        self._members.append(flock)
        return self

    def observe_with(self, observer: Observer):
        """Register ``observer`` on the built flock."""
        self._observers.append(observer)
        return self

    def build(self) -> Flock:
        """Build the flock and reset the builder."""
        flock = Flock(self.name)
        for member in self._members:
            flock.add(member)
        for observer in self._observers:
            flock.register_observer(observer)
        self.logger.info(f"Built {self.name} with {len(flock)} members")
        self.reset()
        return flock
