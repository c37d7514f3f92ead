# tests/runtime/test_rng_registry.py
import numpy as np

from mapnav.runtime.rng import RNGRegistry


def test_named_streams_are_deterministic():
    a = RNGRegistry(123, scenario="romania").stream("destinations").random(5)
    b = RNGRegistry(123, scenario="romania").stream("destinations").random(5)
    assert np.allclose(a, b)


def test_streams_are_independent_and_cached():
    reg = RNGRegistry(123)
    assert reg.stream("destinations") is reg.stream("destinations")
    a = reg.stream("destinations").random(5)
    b = reg.stream("sampling").random(5)
    assert not np.allclose(a, b)


def test_stream_does_not_depend_on_request_order():
    reg1 = RNGRegistry(7)
    x1 = reg1.stream("x").random(3)
    reg2 = RNGRegistry(7)
    reg2.stream("y").random(3)
    x2 = reg2.stream("x").random(3)
    assert np.allclose(x1, x2)


def test_scenarios_are_disjoint():
    a = RNGRegistry(123, scenario="a").stream("destinations").random(10)
    b = RNGRegistry(123, scenario="b").stream("destinations").random(10)
    assert not np.allclose(a, b)
