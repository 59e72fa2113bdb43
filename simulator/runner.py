"""Duck simulator: wires factories, adapters, flocks and observers together."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from config import SimulatorConfig
from patterns import (
    SoundEmitter,
    EmitterFactory,
    Flock,
    FlockBuilder,
    Goose,
    GooseAdapter,
    Quackologist,
    ModelDuck,
    FlyRocketPowered,
    create_factory,
)
from utils.logging_config import LogContext, get_logger


@dataclass
class SimulationResult:
    """Outcome of one simulator run."""
    quack_count: int
    emitter_count: int
    observations: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def count_emitters(emitter: SoundEmitter) -> int:
    """Number of non-flock emitters in the tree rooted at ``emitter``."""
    if isinstance(emitter, Flock):
        return sum(count_emitters(child) for child in emitter)
    return 1


class DuckSimulator:
    """
    Runs the fully composed duck scenario.

    The factory named in the config decides whether ducks are counted; the
    goose joins through an adapter; mallards get a nested flock of their own;
    a quackologist watches the main flock when ``observe`` is set.
    """

    def __init__(self, config: Optional[SimulatorConfig] = None):
        self.config = config or SimulatorConfig()
        self.logger = get_logger(self.__class__.__name__)

    def simulate(self, emitter: SoundEmitter):
        emitter.emit()

    def build_flock(self, factory: EmitterFactory) -> Flock:
        """Build the main flock, with the mallard flock nested at the end."""
        builder = FlockBuilder("Flock of ducks")
        builder.add_emitter(factory.create_mallard_duck())
        builder.add_emitter(factory.create_red_head_duck())
        builder.add_emitter(factory.create_duck_call())
        builder.add_emitter(factory.create_rubber_duck())
        if self.config.include_goose:
            builder.add_emitter(GooseAdapter(Goose()))

        if self.config.mallard_flock_size:
            mallards = (
                FlockBuilder("Flock of mallards")
                .add_emitters(factory.create_mallard_duck, self.config.mallard_flock_size)
                .build()
            )
            builder.add_flock(mallards)

        return builder.build()

    def simulate_all(self, factory: Optional[EmitterFactory] = None) -> SimulationResult:
        """
        Build the flock, let it quack once and report the total.

        Args:
            factory: Product line to use; created from ``config.factory`` when omitted

        Returns:
            SimulationResult with the counted quacks, the number of leaf
            emitters and the number of observer notifications
        """
        factory = factory or create_factory(self.config.factory)
        self.logger.info(f"Simulating with {factory.__class__.__name__}")

        flock = self.build_flock(factory)
        quackologist = None
        if self.config.observe:
            quackologist = Quackologist()
            flock.register_observer(quackologist)

        print("\nDuck simulator")
        with LogContext(self.logger, factory=factory.__class__.__name__, flock=str(flock)):
            self.simulate(flock)

        quack_count = factory.counter.total if factory.counter is not None else 0
        print(f"The ducks quack {quack_count} times")

        result = SimulationResult(
            quack_count=quack_count,
            emitter_count=count_emitters(flock),
            observations=len(quackologist.history) if quackologist else 0
        )
        self.logger.info(f"Simulation finished: {result.to_dict()}")
        return result

    def simulate_strategy(self) -> ModelDuck:
        """Model duck learns to fly with a rocket."""
        print("\nStrategy simulator")
        model = ModelDuck()
        model.display()
        model.perform_fly()
        model.fly_behavior = FlyRocketPowered()
        model.perform_fly()
        model.perform_quack()
        model.swim()
        return model
