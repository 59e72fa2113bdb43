"""
Observer pattern: quackologists watching ducks.

Emitters that want to be watched own an ``Observable`` and forward
``register_observer``/``notify_observers`` to it. The helper only holds weak
references, so registering never keeps an observer alive.
"""
import weakref
from abc import ABC, abstractmethod
from typing import Any, Callable, List
from utils.logging_config import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    """Abstract observer base class."""

    @abstractmethod
    def update(self, observable: Any):
        """Called after the observed emitter has acted."""
        pass


class QuackObservable(ABC):
    """Capability of emitters that can be observed."""

    @abstractmethod
    def register_observer(self, observer: Observer):
        pass

    @abstractmethod
    def notify_observers(self):
        pass


class Observable(QuackObservable):
    """Weakly-referenced observer list owned by a single emitter."""

    def __init__(self, source: Any = None):
        self.source = self if source is None else source
        self._observers: List[weakref.ref] = []

    def register_observer(self, observer: Observer):
        """Append an observer. Registering twice means two updates per notify."""
        self._observers.append(weakref.ref(observer))
        logger.debug(f"Registered {observer.__class__.__name__} on {self.source!r}")

    def notify_observers(self):
        """Call ``update(source)`` on every observer that is still alive."""
        # Dead entries stay in the list; order of live entries is preserved.
        for ref in list(self._observers):
            observer = ref()
            if observer is None:
                continue
            observer.update(self.source)

    @property
    def observers(self) -> List[Observer]:
        """Observers still alive, in registration order."""
        return [obs for obs in (ref() for ref in self._observers) if obs is not None]

    def __len__(self) -> int:
        return len(self._observers)


class Quackologist(Observer):
    """Prints a line for every quack it hears and remembers the sources."""

    def __init__(self):
        self.history: List[Any] = []

    def update(self, observable: Any):
        self.history.append(observable)
        print(f"Quackologist: {observable} just quacked")


class CallbackObserver(Observer):
    """Observer that calls a callback function."""

    def __init__(self, callback: Callable[[Any], Any]):
        self.callback = callback

    def update(self, observable: Any):
        """Call the callback function."""
        self.callback(observable)
