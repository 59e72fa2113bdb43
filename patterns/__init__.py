"""
Design patterns illustrated with ducks.
"""
from .emitter import (
    SoundEmitter,
    Duck,
    MallardDuck,
    RedHeadDuck,
    DuckCall,
    RubberDuck
)
from .adapter import Goose, GooseAdapter
from .decorator import CallCounter, CountingEmitter
from .factory import (
    EmitterFactory,
    DuckFactory,
    CountingDuckFactory,
    register_factory,
    create_factory,
    list_factories
)
from .composite import Flock
from .builder import Builder, FlockBuilder
from .observer import (
    Observer,
    QuackObservable,
    Observable,
    Quackologist,
    CallbackObserver
)
from .strategy import (
    FlyBehavior,
    FlyWithWings,
    FlyNoWay,
    FlyRocketPowered,
    QuackBehavior,
    Quack,
    MuteQuack,
    Squack,
    BehaviorDuck,
    ModelDuck,
    WildMallard
)

__all__ = [
    'SoundEmitter',
    'Duck',
    'MallardDuck',
    'RedHeadDuck',
    'DuckCall',
    'RubberDuck',
    'Goose',
    'GooseAdapter',
    'CallCounter',
    'CountingEmitter',
    'EmitterFactory',
    'DuckFactory',
    'CountingDuckFactory',
    'register_factory',
    'create_factory',
    'list_factories',
    'Flock',
    'Builder',
    'FlockBuilder',
    'Observer',
    'QuackObservable',
    'Observable',
    'Quackologist',
    'CallbackObserver',
    'FlyBehavior',
    'FlyWithWings',
    'FlyNoWay',
    'FlyRocketPowered',
    'QuackBehavior',
    'Quack',
    'MuteQuack',
    'Squack',
    'BehaviorDuck',
    'ModelDuck',
    'WildMallard',
]
