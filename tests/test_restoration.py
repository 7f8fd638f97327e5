from dataclasses import replace

from wheelsoffortune.config import MatchingStrategy
from wheelsoffortune.controller.dispersal import disperse_at
from wheelsoffortune.controller.frame import tick
from wheelsoffortune.controller.restoration import particles_of, restore_last
from wheelsoffortune.model.palettes import PALETTES

PALETTE_A, PALETTE_B = PALETTES[0], PALETTES[1]


def drift(state, frames: int) -> None:
    for _ in range(frames):
        tick(state)


def test_restore_with_empty_history_is_a_no_op(scenario_state):
    assert restore_last(scenario_state) is None
    assert all(not w.dispersed for w in scenario_state.wheels)
    assert scenario_state.particles == []


def test_restore_reverses_the_last_batch(scenario_state):
    state = scenario_state
    batch = disperse_at(state, 100.0, 100.0)
    drift(state, 10)

    assert restore_last(state) == batch
    assert state.history.depth == 0
    for wheel_id in batch:
        wheel = state.wheel(wheel_id)
        assert not wheel.dispersed
        assert wheel.inner_fade == 0.0
    assert all(p.returning for p in state.particles)

    assert restore_last(state) is None
    assert state.history.depth == 0


def test_returning_particles_animate_from_their_current_position(scenario_state):
    state = scenario_state
    disperse_at(state, 100.0, 100.0)
    drift(state, 15)
    positions = [(p.x, p.y) for p in state.particles]

    restore_last(state)

    assert [(p.origin_x, p.origin_y) for p in state.particles] == positions


def test_restoration_is_last_in_first_out(scenario_state):
    state = scenario_state
    first = disperse_at(state, 100.0, 100.0)  # palette A
    second = disperse_at(state, 300.0, 100.0)  # palette B
    drift(state, 5)

    assert restore_last(state) == second
    for wheel in state.wheels:
        assert wheel.dispersed == (wheel.id in first)

    for p in state.particles:
        assert p.returning == (p.owner_id in second)

    assert restore_last(state) == first
    assert all(not w.dispersed for w in state.wheels)


def test_fade_restarts_after_restoration(scenario_state):
    state = scenario_state
    batch = disperse_at(state, 100.0, 100.0)
    restore_last(state)
    tick(state)
    for wheel_id in batch:
        assert state.wheel(wheel_id).inner_fade == state.config.fade_step


def test_proximity_matching_uses_the_ring_geometry(state, add_wheel):
    wheel = add_wheel(200.0, 200.0)
    disperse_at(state, 200.0, 200.0)
    drift(state, 30)

    matched = particles_of(state, wheel)
    assert len(matched) == state.config.particles_per_wheel


def test_proximity_matching_can_claim_a_neighbours_particles(state, add_wheel):
    # Two concentric wheels of equal size share the same ring points.
    lower = add_wheel(200.0, 200.0, palette=PALETTE_A)
    upper = add_wheel(200.0, 200.0, palette=PALETTE_B)
    per_wheel = state.config.particles_per_wheel

    disperse_at(state, 200.0, 200.0)  # upper
    disperse_at(state, 200.0, 200.0)  # lower, the upper one is transparent now
    assert lower.dispersed and upper.dispersed

    restore_last(state)

    assert not lower.dispersed and upper.dispersed
    assert sum(p.returning for p in state.particles) == 2 * per_wheel


def test_owner_matching_only_claims_own_particles(state, add_wheel):
    state.config = replace(state.config, matching=MatchingStrategy.OWNER)
    lower = add_wheel(200.0, 200.0, palette=PALETTE_A)
    add_wheel(200.0, 200.0, palette=PALETTE_B)
    per_wheel = state.config.particles_per_wheel

    disperse_at(state, 200.0, 200.0)
    disperse_at(state, 200.0, 200.0)
    restore_last(state)

    returning = [p for p in state.particles if p.returning]
    assert len(returning) == per_wheel
    assert all(p.owner_id == lower.id for p in returning)


def test_unmatched_particles_keep_drifting(scenario_state):
    state = scenario_state
    disperse_at(state, 300.0, 100.0)  # palette B
    disperse_at(state, 100.0, 100.0)  # palette A
    restore_last(state)

    b_particles = [p for p in state.particles if state.wheel(p.owner_id).palette == PALETTE_B]
    alphas = [p.alpha for p in b_particles]
    tick(state)

    assert all(not p.returning for p in b_particles)
    assert [p.alpha for p in b_particles] == [a - state.config.alpha_step for a in alphas]
