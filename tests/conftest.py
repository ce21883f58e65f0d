import logging

import matplotlib

matplotlib.use("Agg")

import pytest

from farmsim.models.farm import create_server_farm


class SequenceRandom:
    """Deterministic random source replaying a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        if self.calls >= len(self.values):
            raise IndexError("SequenceRandom exhausted")
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture(autouse=True)
def restore_root_logger():
    # configure_logging replaces the root handlers
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture
def default_farm():
    return create_server_farm()


@pytest.fixture
def small_farm():
    # one server per tier
    return create_server_farm(servers=5)
