import pytest

from farmsim.metrics import MetricsCalculator, ResultComparator
from farmsim.models import create_server_farm
from farmsim.simulation import SimulationState, run_simulation
from farmsim.config import SimulationConfig


@pytest.fixture
def loaded_farm():
    farm = create_server_farm(servers=5)
    farm.get_server(0).assign(40.0, tick=1)   # f=0.6, next=41
    farm.get_server(4).assign(30.0, tick=10)  # f=1.0, next=40
    farm.get_server(4).assign(5.5, tick=12)   # next=46
    return farm


def test_last_finish_and_effective_duration(loaded_farm):
    assert MetricsCalculator.last_finish_time(loaded_farm) == 46
    assert MetricsCalculator.effective_duration(loaded_farm, 100) == 100
    assert MetricsCalculator.effective_duration(loaded_farm, 20) == 46


def test_overall_utilization(loaded_farm):
    assert MetricsCalculator.overall_utilization(loaded_farm, 100) == pytest.approx(75.5 / 500)
    assert MetricsCalculator.overall_utilization(loaded_farm, 0) == 0.0


def test_energy(loaded_farm):
    expected = (
        40.0 * 0.6 + 0.4 * (100 - 40.0)
        + 35.5 * 1.0 + 0.4 * (100 - 35.5)
        + 3 * 0.4 * 100
    )
    assert MetricsCalculator.energy(loaded_farm, 100, 0.4) == pytest.approx(expected)


def test_idle_server_energy_is_idle_power_times_duration(loaded_farm):
    idle = loaded_farm.get_server(2)
    assert MetricsCalculator.server_energy(idle, 250, 0.4) == pytest.approx(0.4 * 250)


def test_calculate_from_state(loaded_farm):
    state = SimulationState(farm=loaded_farm, jobs_scheduled=3, first_arrival=1)
    state.finalize()
    metrics = MetricsCalculator.calculate(state, duration=20, idle_power=0.4)

    assert metrics.jobs_scheduled == 3
    assert metrics.first_arrival == 1
    assert metrics.last_finish == 46
    assert metrics.effective_duration == 46
    assert metrics.overall_utilization == pytest.approx(75.5 / (46 * 5))
    assert metrics.idle_servers == 3
    assert set(metrics.to_dict()) == {
        "jobs_scheduled", "first_arrival", "last_finish", "effective_duration",
        "overall_utilization", "energy", "idle_servers",
    }


def test_tier_breakdown(loaded_farm):
    df = MetricsCalculator.tier_breakdown(loaded_farm, 100, 0.4)
    assert list(df.index) == [0, 1, 2, 3, 4]
    assert df.loc[4, "frequency"] == 1.0
    assert df.loc[4, "jobs"] == 2
    assert df.loc[4, "busy_time"] == pytest.approx(35.5)
    assert df.loc[0, "utilization"] == pytest.approx(0.4)
    assert df["servers"].sum() == 5
    assert df["energy"].sum() == pytest.approx(MetricsCalculator.energy(loaded_farm, 100, 0.4))


def test_tier_breakdown_groups_default_farm(default_farm):
    df = MetricsCalculator.tier_breakdown(default_farm, 10000)
    assert list(df["servers"]) == [20] * 5
    assert list(df["frequency"]) == [0.6, 0.7, 0.8, 0.9, 1.0]
    assert (df["utilization"] == 0).all()


def test_tier_utilization_is_mean_of_server_utilization():
    farm = create_server_farm(servers=10)
    farm.get_server(0).assign(30.0, tick=1)
    farm.get_server(1).assign(10.0, tick=1)
    farm.get_server(9).assign(50.0, tick=1)
    df = MetricsCalculator.tier_breakdown(farm, 200)

    expected = (farm.get_server(0).get_utilization(200) + farm.get_server(1).get_utilization(200)) / 2
    assert df.loc[0, "utilization"] == pytest.approx(expected)
    assert df.loc[0, "utilization"] == pytest.approx(0.1)
    assert df.loc[4, "utilization"] == pytest.approx(0.125)


def test_result_comparator():
    results = {
        policy: run_simulation(SimulationConfig(arrival_rate=2, max_execution=60, duration=1000, policy=policy, seed=5))
        for policy in ("greedy", "random")
    }
    df = ResultComparator.compare_policies(results)
    assert list(df.index) == ["greedy", "random"]
    assert df.loc["greedy", "jobs_scheduled"] == results["greedy"].metrics.jobs_scheduled

    best, value = ResultComparator.find_best_policy(results, "energy")
    assert value == min(r.metrics.energy for r in results.values())
    assert results[best].metrics.energy == value

    assert ResultComparator.find_best_policy(results, "no_such_metric") == (None, None)
