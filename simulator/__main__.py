"""Command line entry point: ``python -m simulator``."""
import argparse
import sys

from config import SimulatorConfig, ScenarioPresets
from patterns import list_factories
from utils.exceptions import DuckPondError
from utils.logging_config import LoggerFactory, get_logger
from .runner import DuckSimulator


def get_default_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Run the duck simulator.")
    parser.add_argument("--config", type=str, default=None,
                        help="Path of a YAML or JSON simulator configuration.")
    parser.add_argument("--preset", type=str, default=None, choices=ScenarioPresets.names(),
                        help="Start from one of the predefined scenarios.")
    parser.add_argument("--factory", type=str, default=None, choices=list_factories(),
                        help="Product line used to create the ducks.")
    parser.add_argument("--mallard_flock_size", type=int, default=None,
                        help="Number of mallards in the nested flock.")
    parser.add_argument("--observe", action=argparse.BooleanOptionalAction, default=None,
                        help="Let a quackologist watch the flock.")
    parser.add_argument("--goose", dest="include_goose", action=argparse.BooleanOptionalAction, default=None,
                        help="Add the adapted goose to the flock.")
    parser.add_argument("--strategy", action="store_true",
                        help="Also run the strategy scenario.")
    parser.add_argument("--log_level", type=str, default=None,
                        help="Logging level, e.g. DEBUG or INFO.")
    return parser.parse_args(argv)


def build_config(args) -> SimulatorConfig:
    """Preset, then config file, then environment, then command line flags."""
    config = SimulatorConfig()
    if args.preset:
        config = config.merged(ScenarioPresets.get(args.preset))
    if args.config:
        config = config.merged(SimulatorConfig.read_file(args.config))
    config = SimulatorConfig.from_env(base=config)
    return config.merged({
        'factory': args.factory,
        'mallard_flock_size': args.mallard_flock_size,
        'observe': args.observe,
        'include_goose': args.include_goose,
        'log_level': args.log_level,
    })


def main(argv=None) -> int:
    args = get_default_arguments(argv)
    logger = get_logger("simulator")
    try:
        config = build_config(args)
    except DuckPondError as e:
        logger.error(f"Invalid configuration: {e.message}", extra={'error_details': e.to_dict()})
        return 2

    LoggerFactory.configure(log_level=config.log_level, force=True)
    simulator = DuckSimulator(config)
    simulator.simulate_all()
    if args.strategy:
        simulator.simulate_strategy()
    return 0


if __name__ == "__main__":
    sys.exit(main())
