"""
Composite pattern: a flock quacks like a single duck.
"""
from typing import Iterator, List
from utils.logging_config import get_logger
from .emitter import SoundEmitter
from .observer import Observable, Observer, QuackObservable

logger = get_logger(__name__)


class Flock(SoundEmitter, QuackObservable):
    """
    Ordered collection of emitters that is itself an emitter.

    ``emit()`` walks the children depth-first in insertion order and then
    notifies the flock's own observers. A flock must never contain one of
    its ancestors; that is left to the caller.
    """

    def __init__(self, name: str = "Flock"):
        self.name = name
        self._quackers: List[SoundEmitter] = []
        self._observable = Observable(self)

    def add(self, quacker: SoundEmitter):
        """Append an emitter to the end of the flock."""
        self._quackers.append(quacker)
        logger.debug(f"Added {quacker} to {self.name} ({len(self._quackers)} members)")

    def remove(self, quacker: SoundEmitter):
        """Remove the first child that is ``quacker``; no-op if absent."""
        for index, member in enumerate(self._quackers):
            if member is quacker:
                del self._quackers[index]
                logger.debug(f"Removed {quacker} from {self.name}")
                return

    def emit(self):
        for quacker in self._quackers:
            quacker.emit()
        self.notify_observers()

    def register_observer(self, observer: Observer):
        self._observable.register_observer(observer)

    def notify_observers(self):
        self._observable.notify_observers()

    def __len__(self) -> int:
        return len(self._quackers)

    def __iter__(self) -> Iterator[SoundEmitter]:
        return iter(list(self._quackers))

    def __contains__(self, quacker) -> bool:
        return any(member is quacker for member in self._quackers)

    def __str__(self) -> str:
        return self.name
