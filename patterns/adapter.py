"""
Adapter pattern: lets a goose take part in the duck simulator.
"""
from typing import Any
from utils.logging_config import get_logger
from utils.exceptions import PatternError
from .emitter import SoundEmitter
from .observer import Observable, Observer, QuackObservable

logger = get_logger(__name__)


class Goose:
    """A honker, not a quacker."""

    def honk(self):
        print("Goose honk.")


class GooseAdapter(SoundEmitter, QuackObservable):
    """Presents anything with a ``honk()`` method as a ``SoundEmitter``."""

    def __init__(self, goose: Any):
        if goose is None or not callable(getattr(goose, 'honk', None)):
            raise PatternError(
                "GooseAdapter needs an object with a honk() method",
                details={'adaptee': type(goose).__name__}
            )
        self._goose = goose
        self._observable = Observable(self)

    @property
    def goose(self) -> Any:
        return self._goose

    def emit(self):
        self._goose.honk()
        logger.debug(f"Adapted {self._goose.__class__.__name__} emitted")
        self.notify_observers()

    def register_observer(self, observer: Observer):
        self._observable.register_observer(observer)

    def notify_observers(self):
        self._observable.notify_observers()

    def __str__(self) -> str:
        return "Goose pretending to be a Duck"
