import pytest

from farmsim.config import ConfigurationError, SimulationConfig


def test_default_config_is_valid():
    config = SimulationConfig(arrival_rate=5, max_execution=100).validate()
    assert config.servers == 100
    assert config.duration == 10000
    assert list(config.frequency_tiers) == [0.6, 0.7, 0.8, 0.9, 1.0]
    assert config.idle_power == 0.4
    assert config.policy == "greedy"
    assert config.arrival_probability == pytest.approx(0.2)


def test_max_execution_boundary():
    SimulationConfig(arrival_rate=1, max_execution=10).validate()
    with pytest.raises(ConfigurationError, match="max execution should be at least 10"):
        SimulationConfig(arrival_rate=1, max_execution=9).validate()


@pytest.mark.parametrize(
    "overrides",
    [
        {"arrival_rate": 0},
        {"arrival_rate": -3},
        {"servers": 0},
        {"duration": 0},
        {"frequency_tiers": ()},
        {"frequency_tiers": (0.5, 0.0)},
        {"idle_power": -0.1},
        {"policy": "round-robin"},
    ],
)
def test_invalid_configuration_rejected(overrides):
    params = {"arrival_rate": 2, "max_execution": 50, **overrides}
    with pytest.raises(ConfigurationError):
        SimulationConfig(**params).validate()


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_to_dict():
    data = SimulationConfig(arrival_rate=3, max_execution=40, seed=9).to_dict()
    assert data["arrival_rate"] == 3
    assert data["seed"] == 9
    assert data["frequency_tiers"] == [0.6, 0.7, 0.8, 0.9, 1.0]
