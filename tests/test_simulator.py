"""Tests for the duck simulator and its command line."""
import pytest
from config import SimulatorConfig, ScenarioPresets
from patterns import CallCounter, CountingDuckFactory, DuckFactory, Flock, MallardDuck
from simulator import DuckSimulator, count_emitters
from simulator.__main__ import main


class TestDuckSimulator:
    """Tests for the composed scenario."""

    def test_full_scenario(self, capsys):
        """Test the observed, counted flock end to end."""
        result = DuckSimulator(SimulatorConfig()).simulate_all()

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "",
            "Duck simulator",
            "Mallard Duck quack.",
            "RedHeadDuck quack.",
            "Duckcall Kwak",
            "RubberDuck squack.",
            "Goose honk.",
            "Mallard Duck quack.",
            "Mallard Duck quack.",
            "Mallard Duck quack.",
            "Quackologist: Flock of ducks just quacked",
            "The ducks quack 7 times",
        ]
        assert result.quack_count == 7
        assert result.emitter_count == 8
        assert result.observations == 1

    def test_plain_factory_counts_nothing(self, capsys):
        """Test plain ducks are not counted."""
        config = SimulatorConfig.from_dict(ScenarioPresets.basic())
        result = DuckSimulator(config).simulate_all()

        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "The ducks quack 0 times"
        assert result.quack_count == 0
        assert result.emitter_count == 4
        assert result.observations == 0

    def test_explicit_factory(self, capsys):
        """Test a given factory wins over the configured one."""
        counter = CallCounter()
        config = SimulatorConfig(factory="plain", include_goose=False, observe=False)

        result = DuckSimulator(config).simulate_all(CountingDuckFactory(counter))

        assert result.quack_count == 7
        assert counter.total == 7

    def test_build_flock_without_mallards(self):
        """Test no nested flock is added when its size is zero."""
        config = SimulatorConfig(mallard_flock_size=0, include_goose=False)
        flock = DuckSimulator(config).build_flock(DuckFactory())
        assert len(flock) == 4
        assert not any(isinstance(member, Flock) for member in flock)

    def test_strategy_scenario(self, capsys):
        """Test the strategy scenario output."""
        DuckSimulator().simulate_strategy()
        assert capsys.readouterr().out.splitlines() == [
            "",
            "Strategy simulator",
            "I'm a model duck",
            "I can't fly",
            "I'm flying with a rocket",
            "Quack",
            "All ducks float, even decoys",
        ]


def test_count_emitters():
    """Test leaves are counted through nested flocks."""
    inner = Flock()
    inner.add(MallardDuck())
    inner.add(MallardDuck())
    outer = Flock()
    outer.add(inner)
    outer.add(MallardDuck())
    outer.add(Flock())
    assert count_emitters(outer) == 3


class TestCommandLine:
    """Tests for python -m simulator."""

    def test_preset_with_override(self, capsys):
        """Test presets can be combined with flags."""
        assert main(["--preset", "flock", "--mallard_flock_size", "1", "--log_level", "ERROR"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "The ducks quack 5 times"

    def test_config_file(self, tmp_path, capsys):
        """Test a configuration file is honoured."""
        path = tmp_path / "sim.yaml"
        SimulatorConfig(factory="plain", observe=False, log_level="ERROR").to_yaml(str(path))

        assert main(["--config", str(path), "--no-goose"]) == 0

        out = capsys.readouterr().out
        assert "Goose honk." not in out
        assert "The ducks quack 0 times" in out

    def test_partial_config_file_keeps_preset(self, tmp_path, capsys):
        """Test a file only overrides the settings it names."""
        path = tmp_path / "quiet.yaml"
        path.write_text("log_level: ERROR\n")

        assert main(["--preset", "basic", "--config", str(path)]) == 0

        out = capsys.readouterr().out
        assert "Goose honk." not in out
        assert "The ducks quack 0 times" in out

    def test_bad_config_file(self, tmp_path):
        """Test configuration errors give a non-zero exit code."""
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 2

    def test_unknown_factory_flag(self):
        """Test argparse rejects unknown factories."""
        with pytest.raises(SystemExit):
            main(["--factory", "golden"])
