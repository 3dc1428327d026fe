import os
import sys

import pytest

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)


class ScriptedClock:
    """
    Fake clock that makes each integration run cost a scripted amount.

    The integrator reads the clock once at the start and once at the end
    of a run; every second read advances time by the next scripted cost.
    Costs that are binary fractions keep the differences exact.
    """
    def __init__(self, costs, default=0.0):
        self.costs = list(costs)
        self.default = default
        self.now = 0.0
        self.calls = 0

    def __call__(self):
        if self.calls % 2 == 1:
            self.now += self.costs.pop(0) if self.costs else self.default
        self.calls += 1
        return self.now


@pytest.fixture
def scripted_clock():
    """Factory for ScriptedClock instances."""
    return ScriptedClock
