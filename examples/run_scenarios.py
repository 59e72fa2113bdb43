"""Example script walking through every stage of the duck story."""
from config import SimulatorConfig, ScenarioPresets
from simulator import DuckSimulator


def run_preset(name):
    """Run one predefined scenario."""
    config = SimulatorConfig.from_dict(ScenarioPresets.get(name))
    return DuckSimulator(config).simulate_all()


if __name__ == "__main__":
    for name in ScenarioPresets.names():
        print("=" * 60)
        print(f"Running {name} scenario")
        print("=" * 60)
        run_preset(name)

    print("\n" + "=" * 60)
    print("Running strategy scenario")
    print("=" * 60)
    DuckSimulator().simulate_strategy()
