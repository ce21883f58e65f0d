import pytest

from farmsim.config import get_tier_frequencies
from farmsim.models import Job, Server, create_server_farm, execution_time


@pytest.mark.parametrize("frequency", [0.6, 0.7, 0.8, 0.9, 1.0])
def test_execution_time_factor_zero_is_frequency_independent(frequency):
    job = Job(arrival_tick=1, base_duration=37.5, factor=0.0)
    assert job.get_execution_time(Server(0, frequency)) == pytest.approx(37.5)


@pytest.mark.parametrize("frequency", [0.6, 0.7, 0.8, 0.9, 1.0])
def test_execution_time_factor_one_scales_inversely(frequency):
    job = Job(arrival_tick=1, base_duration=37.5, factor=1.0)
    assert job.get_execution_time(Server(0, frequency)) == pytest.approx(37.5 / frequency)


def test_execution_time_amdahl_split():
    # 75% frequency-insensitive, 25% compute-bound at half speed
    assert execution_time(100.0, 0.25, 0.5) == pytest.approx(75.0 + 25.0 / 0.5)


def test_default_farm_tiers(default_farm):
    assert default_farm.get_server_count() == 100
    frequencies = default_farm.get_frequencies()
    assert frequencies[:20] == [0.6] * 20
    assert frequencies[20:40] == [0.7] * 20
    assert frequencies[80:] == [1.0] * 20
    assert frequencies == sorted(frequencies)
    assert [s.tier for s in default_farm.servers[::20]] == [0, 1, 2, 3, 4]


def test_tier_frequencies_uneven_split_stays_monotonic():
    frequencies = get_tier_frequencies(servers=7)
    assert len(frequencies) == 7
    assert frequencies == sorted(frequencies)
    assert frequencies[0] == 0.6
    assert frequencies[-1] == 1.0


def test_server_assign_updates_busy_and_next_available():
    server = Server(server_id=3, frequency=0.8)
    server.assign(12.5, tick=4)
    assert server.busy_time == pytest.approx(12.5)
    assert server.next_available_time == 17
    assert server.next_available_time >= 4 + 12.5

    # queued behind previous work
    server.assign(3.0, tick=5)
    assert server.busy_time == pytest.approx(15.5)
    assert server.next_available_time == 20
    assert server.job_count == 2


def test_server_assign_after_idle_gap_starts_at_tick():
    server = Server(server_id=0, frequency=1.0)
    server.assign(10.0, tick=1)
    server.assign(10.0, tick=50)
    assert server.next_available_time == 60
    assert server.busy_time == pytest.approx(20.0)


def test_server_energy_idle_and_busy():
    idle = Server(server_id=0, frequency=0.6)
    assert idle.is_idle()
    assert idle.get_energy(1000, 0.4) == pytest.approx(400.0)

    busy = Server(server_id=1, frequency=0.9)
    busy.assign(100.0, tick=1)
    assert busy.get_energy(1000, 0.4) == pytest.approx(100.0 * 0.9 + 0.4 * 900.0)


def test_farm_reset_and_statistics(small_farm):
    small_farm.get_server(2).assign(20.0, tick=3)
    stats = small_farm.get_farm_statistics()
    assert stats["server_count"] == 5
    assert stats["idle_servers"] == 4
    assert stats["last_finish_time"] == 23
    assert stats["tiers"] == [0.6, 0.7, 0.8, 0.9, 1.0]

    small_farm.reset()
    assert small_farm.get_total_busy_time() == 0.0
    assert small_farm.get_last_finish_time() == 0


def test_empty_farm_last_finish_is_zero():
    assert create_server_farm(servers=0).get_last_finish_time() == 0


def test_server_completion_time_uses_own_availability():
    job = Job(arrival_tick=5, base_duration=20.0, factor=1.0)
    server = Server(server_id=0, frequency=0.8)
    assert server.get_completion_time(job, 5) == pytest.approx(5 + 25.0)

    server.next_available_time = 40
    assert server.get_completion_time(job, 5) == pytest.approx(40 + 25.0)


def test_server_utilization():
    server = Server(server_id=0, frequency=1.0)
    server.assign(25.0, tick=1)
    assert server.get_utilization(100) == pytest.approx(0.25)
    assert server.get_utilization(0) == 0.0


def test_frozen_server_rejects_changes():
    server = Server(server_id=7, frequency=0.7)
    server.assign(10.0, tick=1)
    server.freeze()
    with pytest.raises(RuntimeError, match="read-only"):
        server.assign(1.0, tick=2)
    with pytest.raises(RuntimeError):
        server.reset()
    assert server.busy_time == pytest.approx(10.0)
