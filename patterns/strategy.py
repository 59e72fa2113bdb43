"""
Strategy pattern: flying and quacking as interchangeable behaviors.
"""
from abc import ABC, abstractmethod
from utils.logging_config import get_logger

logger = get_logger(__name__)


class FlyBehavior(ABC):
    """Abstract flying strategy."""

    @abstractmethod
    def fly(self):
        pass


class FlyWithWings(FlyBehavior):
    def fly(self):
        print("I'm flying")


class FlyNoWay(FlyBehavior):
    def fly(self):
        print("I can't fly")


class FlyRocketPowered(FlyBehavior):
    def fly(self):
        print("I'm flying with a rocket")


class QuackBehavior(ABC):
    """Abstract quacking strategy."""

    @abstractmethod
    def quack(self):
        pass


class Quack(QuackBehavior):
    def quack(self):
        print("Quack")


class MuteQuack(QuackBehavior):
    def quack(self):
        print("Silence")


class Squack(QuackBehavior):
    def quack(self):
        print("Squack")


class BehaviorDuck(ABC):
    """Duck whose flying and quacking are delegated to strategies."""

    def __init__(self, fly_behavior: FlyBehavior, quack_behavior: QuackBehavior):
        self._fly_behavior = fly_behavior
        self._quack_behavior = quack_behavior
        self.logger = get_logger(self.__class__.__name__)

    @property
    def fly_behavior(self) -> FlyBehavior:
        return self._fly_behavior

    @fly_behavior.setter
    def fly_behavior(self, behavior: FlyBehavior):
        self.logger.info(f"Switching fly behavior to {behavior.__class__.__name__}")
        self._fly_behavior = behavior

    @property
    def quack_behavior(self) -> QuackBehavior:
        return self._quack_behavior

    @quack_behavior.setter
    def quack_behavior(self, behavior: QuackBehavior):
        self.logger.info(f"Switching quack behavior to {behavior.__class__.__name__}")
        self._quack_behavior = behavior

    @abstractmethod
    def display(self):
        pass

    def perform_fly(self):
        self._fly_behavior.fly()

    def perform_quack(self):
        self._quack_behavior.quack()

    def swim(self):
        print("All ducks float, even decoys")


class ModelDuck(BehaviorDuck):
    def __init__(self):
        super().__init__(FlyNoWay(), Quack())

    def display(self):
        print("I'm a model duck")


class WildMallard(BehaviorDuck):
    def __init__(self):
        super().__init__(FlyWithWings(), Quack())

    def display(self):
        print("I'm a mallard duck")
