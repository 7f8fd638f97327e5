import math

import pytest

from wheelsoffortune.config import ArtworkConfig
from wheelsoffortune.model.geometry_primitives import Vector
from wheelsoffortune.model.particle import Particle, ParticleKind, SpokeSpin
from wheelsoffortune.utils import lerp


def make_particle(kind: ParticleKind = ParticleKind.OUTER_DOT, **overrides) -> Particle:
    values = dict(
        kind=kind,
        x=100.0, y=100.0,
        target_x=100.0, target_y=100.0,
        color="#FFD700",
        size=4.0,
        velocity=Vector(1.0, 0.0),
        wind=Vector(0.0, 0.1),
        owner_id=0,
    )
    if kind == ParticleKind.SPOKE:
        values["spin"] = SpokeSpin(ring_angle=0.5, rotation=0.5, rotation_speed=0.04)
    values.update(overrides)
    return Particle(**values)


def test_drift_applies_velocity_wind_fade_and_shrink(config):
    p = make_particle()
    p.update(config)

    assert (p.x, p.y) == (101.0, 100.0)
    assert p.velocity == Vector(1.0, 0.1)
    assert p.alpha == 253.0
    assert p.size == pytest.approx(4.0 * 0.99)

    p.update(config)
    assert p.y == pytest.approx(100.1)


def test_drifting_spoke_rotates(config):
    p = make_particle(ParticleKind.SPOKE)
    p.update(config)
    assert p.rotation == pytest.approx(0.54)


def test_drifting_alpha_is_monotonic_and_reaches_zero_in_bounded_ticks(config):
    p = make_particle()
    previous = p.alpha
    ticks = 0
    while not p.is_finished(config):
        p.update(config)
        ticks += 1
        assert 0.0 <= p.alpha <= previous
        previous = p.alpha
        assert ticks <= 1000

    assert ticks == math.ceil(255 / config.alpha_step)
    assert p.alpha == 0.0


def test_spoke_requires_payload():
    with pytest.raises(ValueError):
        Particle(
            kind=ParticleKind.SPOKE,
            x=0.0, y=0.0, target_x=0.0, target_y=0.0,
            color="#FFFFFF", size=1.0,
            velocity=Vector(0.0, 0.0), wind=Vector(0.0, 0.0),
            owner_id=0,
        )


def test_start_return_snapshots_origin_and_rest_size(config):
    p = make_particle(ParticleKind.SPOKE, size=10.0)
    for _ in range(5):
        p.update(config)
    size_before = p.size

    p.start_return(config)

    assert p.returning
    assert (p.origin_x, p.origin_y) == (p.x, p.y)
    assert p.rest_size == pytest.approx(size_before / 5.0)


def test_dot_rests_at_its_drift_adjusted_size(config):
    p = make_particle(size=8.0)
    p.update(config)
    p.start_return(config)
    assert p.rest_size == pytest.approx(8.0 * 0.99)


def test_return_eases_towards_target(config):
    p = make_particle(x=200.0, y=100.0, target_x=100.0, target_y=100.0)
    p.start_return(config)
    p.update(config)

    assert p.x == pytest.approx(200.0 - 100.0 * 0.05)
    assert p.y == 100.0
    assert p.alpha == pytest.approx(255.0 * 0.9)


def test_return_damps_spoke_rotation(config):
    p = make_particle(ParticleKind.SPOKE)
    p.start_return(config)
    speeds = []
    for _ in range(20):
        p.update(config)
        speeds.append(abs(p.spin.rotation_speed))
    assert speeds == sorted(speeds, reverse=True)
    assert speeds[-1] < 0.04 * 0.95 ** 19


def test_returning_spoke_holds_its_angle(config):
    p = make_particle(ParticleKind.SPOKE, spin=SpokeSpin(ring_angle=0.0, rotation=1.0, rotation_speed=0.05))
    p.start_return(config)
    for _ in range(100):
        p.update(config)
    assert p.rotation == 1.0
    assert abs(p.spin.rotation_speed) < 0.05


def test_return_eases_size_towards_rest_size(config):
    p = make_particle(ParticleKind.SPOKE, size=10.0)
    p.start_return(config)
    rest = p.rest_size
    assert rest == pytest.approx(2.0)

    p.update(config)
    assert p.size == pytest.approx(lerp(10.0, rest, config.return_speed * 2))

    for _ in range(200):
        p.update(config)
    assert p.size == pytest.approx(rest, abs=1e-6)
    assert p.rest_size == rest


def test_returning_particle_finishes_once_faded_and_home(config):
    p = make_particle(x=300.0, y=250.0, target_x=100.0, target_y=100.0)
    p.start_return(config)

    ticks = 0
    while not p.is_finished(config):
        p.update(config)
        ticks += 1
        assert 0.0 <= p.alpha <= 255.0
        assert ticks < 1000

    assert p.alpha == 0.0
    assert p.distance_to_target() < config.arrival_epsilon


def test_faded_returning_particle_far_from_home_is_kept(config):
    p = make_particle(x=500.0, y=500.0, target_x=100.0, target_y=100.0)
    p.start_return(config)
    p.alpha = 0.0
    assert not p.is_finished(config)


def test_drifting_particle_with_alpha_left_is_kept():
    p = make_particle()
    assert not p.is_finished(ArtworkConfig())
