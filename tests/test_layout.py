import logging
from dataclasses import replace

import numpy as np
import pytest

from wheelsoffortune.controller.dispersal import disperse_at
from wheelsoffortune.controller.layout import build_layout, connect_wheels, initialize_artwork, place_wheels
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.palettes import PALETTES
from wheelsoffortune.utils import dist


def test_layout_respects_packing_rules(config):
    width, height = 1280.0, 800.0
    result = build_layout(width, height, config, np.random.default_rng(42))

    assert 1 <= len(result.wheels) <= config.wheel_count
    assert result.attempts <= config.max_attempts
    for i, wheel in enumerate(result.wheels):
        assert wheel.id == i
        assert width * config.min_radius_fraction <= wheel.radius <= width * config.max_radius_fraction
        assert wheel.radius <= wheel.x <= width - wheel.radius
        assert wheel.radius <= wheel.y <= height - wheel.radius
        assert wheel.palette in PALETTES
        assert not wheel.dispersed and wheel.inner_fade == 0.0

    for i, a in enumerate(result.wheels):
        for b in result.wheels[i + 1:]:
            limit = a.radius + b.radius - min(a.radius, b.radius) * config.overlap_fraction
            assert dist(a.x, a.y, b.x, b.y) >= limit


def test_every_later_wheel_touches_an_earlier_one(config):
    result = build_layout(1280.0, 800.0, config, np.random.default_rng(3))
    wheels = result.wheels
    for k in range(1, len(wheels)):
        w = wheels[k]
        assert any(
            dist(w.x, w.y, o.x, o.y) < (w.radius + o.radius) * config.neighbour_factor
            for o in wheels[:k]
        )


def test_consecutive_wheels_differ_in_palette(config):
    wheels, _ = place_wheels(1280.0, 800.0, config, np.random.default_rng(11))
    for previous, current in zip(wheels, wheels[1:]):
        assert previous.palette != current.palette


def test_same_seed_same_layout(config):
    first = build_layout(1000.0, 700.0, config, np.random.default_rng(5))
    second = build_layout(1000.0, 700.0, config, np.random.default_rng(5))
    assert [(w.x, w.y, w.radius) for w in first.wheels] == [(w.x, w.y, w.radius) for w in second.wheels]
    assert first.connectors == second.connectors


def test_short_budget_logs_a_warning(config, caplog):
    config = replace(config, max_attempts=1)
    with caplog.at_level(logging.WARNING, logger="wheelsoffortune"):
        result = build_layout(1280.0, 800.0, config, np.random.default_rng(0))

    assert len(result.wheels) == 1
    assert not result.complete
    assert "Could not place all wheels" in caplog.text


def test_empty_viewport_places_nothing(config):
    wheels, attempts = place_wheels(0.0, 800.0, config, np.random.default_rng(0))
    assert wheels == []
    assert attempts == 0


def test_zero_wheels_requested(config):
    result = build_layout(800.0, 600.0, replace(config, wheel_count=0), np.random.default_rng(0))
    assert result.wheels == []
    assert result.connectors == []
    assert result.complete


def test_connectors_link_only_nearby_wheels(config):
    wheels = [
        Wheel(id=0, x=100.0, y=100.0, radius=50.0, palette=PALETTES[0]),
        Wheel(id=1, x=200.0, y=100.0, radius=50.0, palette=PALETTES[1]),
        Wheel(id=2, x=700.0, y=100.0, radius=50.0, palette=PALETTES[2]),
    ]
    connectors = connect_wheels(wheels, config, np.random.default_rng(0))

    assert [(c.first, c.second) for c in connectors] == [(0, 1)]
    assert connectors[0].color in [p.base for p in PALETTES]


def test_connector_links_span_the_gap(config):
    wheels = [
        Wheel(id=0, x=100.0, y=100.0, radius=50.0, palette=PALETTES[0]),
        Wheel(id=1, x=220.0, y=100.0, radius=50.0, palette=PALETTES[1]),
    ]
    (connector,) = connect_wheels(wheels, config, np.random.default_rng(0))

    start, end = connector.endpoints(wheels)
    assert start == pytest.approx((150.0, 100.0))
    assert end == pytest.approx((170.0, 100.0))
    assert connector.midpoint(wheels) == pytest.approx((160.0, 100.0))
    links = connector.link_positions(wheels, 15.0)
    assert len(links) == 2
    assert links[0] == pytest.approx((150.0, 100.0))
    assert links[1] == pytest.approx((170.0, 100.0))
    assert connector.link_positions(wheels, 25.0) == []


def test_initialize_discards_previous_session(state):
    initialize_artwork(state, 1000, 700)
    first = state.wheels[0]
    disperse_at(state, first.x, first.y)
    assert state.particles and state.history.depth == 1

    initialize_artwork(state, 900, 600)

    assert state.particles == []
    assert state.history.depth == 0
    assert (state.width, state.height) == (900.0, 600.0)
    assert state.wheels
    assert all(not w.dispersed for w in state.wheels)
    for c in state.connectors:
        assert 0 <= c.first < c.second < len(state.wheels)
