"""Tests for the body registry, orbit history and function API."""

import numpy as np
import pytest
from solar_sim import create_simulation, add_body, step, bodies
from solar_sim.physics.body import OrbitHistory
from solar_sim.physics.registry import BodyRegistry
from solar_sim.utils.config import SimulationConfig


def test_first_body_is_anchor():
    """Test the first added body takes the anchor role."""
    registry = BodyRegistry()

    sun = registry.add_body((540.0, 540.0), (0.0, 0.0), 1.0e6, 20.0, "yellow")
    earth = registry.add_body((640.0, 540.0), (0.0, 1.0), 1.0, 5.0, "blue")
    mars = registry.add_body((692.0, 540.0), (0.0, 1.0), 0.107, 4.0, "red")

    assert (sun, earth, mars) == (0, 1, 2)
    assert registry.anchor.color == "yellow"
    assert [b.color for b in registry.orbiters] == ["blue", "red"]
    assert [b.color for b in registry.bodies()] == ["yellow", "blue", "red"]
    assert len(registry) == 3
    assert registry[earth] is registry.orbiters[0]


def test_empty_registry():
    """Test an empty registry has no bodies."""
    registry = BodyRegistry()

    assert registry.anchor is None
    assert registry.bodies() == ()
    assert len(registry) == 0


def test_body_attributes_are_read_only():
    """Test mass, radius and color cannot be reassigned."""
    registry = BodyRegistry()
    registry.add_body((0.0, 0.0), (0.0, 0.0), 1.0e6, 20.0, "yellow")

    with pytest.raises(AttributeError):
        registry.anchor.mass = 2.0
    with pytest.raises(AttributeError):
        registry.anchor.radius = 2.0
    with pytest.raises(AttributeError):
        registry.anchor.color = "red"


def test_invalid_bodies_rejected():
    """Test non-positive mass/radius and malformed vectors raise ValueError."""
    registry = BodyRegistry()

    with pytest.raises(ValueError):
        registry.add_body((0.0, 0.0), (0.0, 0.0), 0.0, 20.0, "yellow")
    with pytest.raises(ValueError):
        registry.add_body((0.0, 0.0), (0.0, 0.0), -1.0, 20.0, "yellow")
    with pytest.raises(ValueError):
        registry.add_body((0.0, 0.0), (0.0, 0.0), 1.0, 0.0, "yellow")
    with pytest.raises(ValueError):
        registry.add_body((0.0, 0.0, 0.0), (0.0, 0.0), 1.0, 1.0, "yellow")
    assert len(registry) == 0


def test_moving_anchor_warns():
    """Test a non-zero anchor velocity is accepted with a warning."""
    registry = BodyRegistry()

    with pytest.warns(UserWarning):
        registry.add_body((0.0, 0.0), (1.0, 0.0), 1.0e6, 20.0, "yellow")
    registry.add_body((100.0, 0.0), (0.0, 0.0), 1.0, 5.0, "blue")

    step(registry, 1.0 / 60.0)
    assert np.array_equal(registry.anchor.position, [0.0, 0.0])


def test_orbit_history_ring_buffer():
    """Test push-and-evict keeps the newest samples oldest-first."""
    history = OrbitHistory(capacity=3)

    for i in range(5):
        history.append((float(i), -float(i)))

    assert len(history) == 3
    assert history.capacity == 3
    assert np.array_equal(history.to_array(), [[2.0, -2.0], [3.0, -3.0], [4.0, -4.0]])
    assert np.array_equal(history[0], [2.0, -2.0])
    assert np.array_equal(history[-1], [4.0, -4.0])
    assert [p[0] for p in history] == [2.0, 3.0, 4.0]
    with pytest.raises(IndexError):
        history[3]

    history.clear()
    assert len(history) == 0
    assert history.to_array().shape == (0, 2)


def test_history_length_bound():
    """Test history length is min(k, cap) and holds the latest positions."""
    registry = create_simulation()
    add_body(registry, (540.0, 540.0), (0.0, 0.0), 1.0e6, 20.0, "yellow")
    add_body(registry, (640.0, 540.0), (0.0, 8.167e-4), 1.0, 5.0, "blue")
    orbiter = registry.orbiters[0]
    recorded = []

    for k in range(1, 251):
        step(registry, 1.0 / 60.0)
        recorded.append(orbiter.position.copy())
        assert len(orbiter.orbit_history) == min(k, 200)

    assert np.array_equal(orbiter.orbit_history.to_array(), np.array(recorded[-200:]))


def test_eviction_order():
    """Test 201 steps leave samples from steps 2..201, oldest first."""
    registry = create_simulation(SimulationConfig(G=1.0, time_scale=1.0))
    add_body(registry, (0.0, 0.0), (0.0, 0.0), 1000.0, 20.0, "yellow")
    add_body(registry, (10.0, 0.0), (0.0, 10.0), 1.0, 5.0, "blue")
    orbiter = registry.orbiters[0]
    recorded = []

    for _ in range(201):
        step(registry, 0.01)
        recorded.append(orbiter.position.copy())

    history = orbiter.orbit_history.to_array()
    assert len(history) == 200
    assert np.array_equal(history, np.array(recorded[1:]))
    assert not np.any(np.all(history == recorded[0], axis=1))


def test_history_capacity_from_config():
    """Test the history cap comes from the configuration."""
    registry = create_simulation(SimulationConfig(history_capacity=5))
    add_body(registry, (0.0, 0.0), (0.0, 0.0), 1.0e6, 20.0, "yellow")
    add_body(registry, (100.0, 0.0), (0.0, 1e-3), 1.0, 5.0, "blue")

    for _ in range(12):
        step(registry, 1.0 / 60.0)

    assert len(registry.orbiters[0].orbit_history) == 5


def test_bodies_view_is_snapshot():
    """Test the drawing view exposes copies, anchor first."""
    registry = create_simulation()
    add_body(registry, (540.0, 540.0), (0.0, 0.0), 1.0e6, 20.0, "yellow")
    add_body(registry, (640.0, 540.0), (0.0, 8.167e-4), 1.0, 5.0, "blue")
    step(registry, 1.0 / 60.0)

    views = bodies(registry)

    assert len(views) == 2
    sun, earth = views
    assert sun.radius == 20.0 and sun.color == "yellow"
    assert sun.orbit_history.shape == (0, 2)
    assert earth.orbit_history.shape == (1, 2)
    assert np.array_equal(earth.position, registry.orbiters[0].position)
    with pytest.raises(ValueError):
        earth.position[0] = 0.0

    step(registry, 1.0 / 60.0)
    assert earth.orbit_history.shape == (1, 2)


def test_orbit_history_slicing():
    """Test slices return copies of samples, oldest first."""
    history = OrbitHistory(capacity=4)
    for i in range(6):
        history.append((float(i), 0.0))

    assert np.array_equal(history[1:3], [[3.0, 0.0], [4.0, 0.0]])
    assert np.array_equal(history[-2:], [[4.0, 0.0], [5.0, 0.0]])
    assert history[::-1][0][0] == 5.0
