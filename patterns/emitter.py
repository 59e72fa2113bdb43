"""
Sound emitters: the ``SoundEmitter`` capability and the four leaf ducks.
"""
from abc import ABC, abstractmethod
from utils.logging_config import get_logger
from .observer import Observable, Observer, QuackObservable

logger = get_logger(__name__)


class SoundEmitter(ABC):
    """Anything that can produce a call."""

    @abstractmethod
    def emit(self):
        """Produce the call."""
        pass


class Duck(SoundEmitter, QuackObservable):
    """
    Base class for leaf emitters.

    Subclasses only set ``call``. Observer handling is delegated to an
    owned ``Observable`` which reports this duck as the source.
    """

    call: str = ""

    def __init__(self):
        self._observable = Observable(self)

    def emit(self):
        print(self.call)
        logger.debug(f"{self.__class__.__name__} emitted")
        self.notify_observers()

    def register_observer(self, observer: Observer):
        self._observable.register_observer(observer)

    def notify_observers(self):
        self._observable.notify_observers()

    def __str__(self) -> str:
        return self.__class__.__name__


class MallardDuck(Duck):
    call = "Mallard Duck quack."


class RedHeadDuck(Duck):
    call = "RedHeadDuck quack."


class DuckCall(Duck):
    call = "Duckcall Kwak"


class RubberDuck(Duck):
    call = "RubberDuck squack."
