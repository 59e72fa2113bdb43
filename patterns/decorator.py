"""
Decorator pattern: counting quacks without touching the duck classes.
"""
import threading
from utils.logging_config import get_logger
from utils.exceptions import PatternError
from .emitter import SoundEmitter
from .observer import Observer, QuackObservable

logger = get_logger(__name__)


class CallCounter:
    """
    Shared quack counter.

    Every ``CountingEmitter`` built with the same counter adds to the same
    total. Increments are lock-guarded so emitters may run on any thread.
    """

    def __init__(self):
        self._total = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._total += 1
            return self._total

    @property
    def total(self) -> int:
        return self._total

    def reset(self):
        """Start over from zero. Meant for fixtures and reruns."""
        with self._lock:
            self._total = 0

    def __repr__(self) -> str:
        return f"CallCounter(total={self._total})"


class CountingEmitter(SoundEmitter, QuackObservable):
    """Wraps an emitter and counts every call that passes through it."""

    def __init__(self, emitter: SoundEmitter, counter: CallCounter):
        if emitter is None or counter is None:
            raise PatternError(
                "CountingEmitter needs both an emitter and a counter",
                details={'emitter': repr(emitter), 'counter': repr(counter)}
            )
        self._emitter = emitter
        self._counter = counter

    @property
    def emitter(self) -> SoundEmitter:
        return self._emitter

    @property
    def counter(self) -> CallCounter:
        return self._counter

    @property
    def total(self) -> int:
        """Quacks counted so far by every emitter sharing this counter."""
        return self._counter.total

    def emit(self):
        self._emitter.emit()
        total = self._counter.increment()
        logger.debug(f"Counted quack #{total} from {self._emitter}")

    def register_observer(self, observer: Observer):
        # Observers watch the decorated duck itself.
        if isinstance(self._emitter, QuackObservable):
            self._emitter.register_observer(observer)
        else:
            logger.debug(
                f"{self._emitter.__class__.__name__} is not observable; "
                f"ignoring {observer.__class__.__name__}"
            )

    def notify_observers(self):
        if isinstance(self._emitter, QuackObservable):
            self._emitter.notify_observers()

    def __str__(self) -> str:
        return str(self._emitter)
