import math
import random

import pytest

from animation import (
    DARK_FILL,
    LIGHT_FILL,
    FrameScheduler,
    HeadlessHost,
    ParticleField,
    SvgSurface,
    ThemeState,
    render_background_svg,
)


@pytest.fixture
def host():
    return HeadlessHost(800, 600, surface=SvgSurface())


@pytest.fixture
def theme():
    return ThemeState(is_dark=False)


def make_field(host, theme, **kwargs):
    return ParticleField(host, theme, rng=random.Random(5), **kwargs)


def test_mount_sizes_surface_and_draws_first_frame(host, theme):
    field = make_field(host, theme)
    field.mount()

    assert (host.surface.width, host.surface.height) == (800, 600)
    assert len(field.particles) == 80
    assert len(host.surface.circles) == 80
    assert field.time == pytest.approx(0.005)
    assert host.scheduler.pending_count == 1
    assert len(host.resize_listeners) == 1


def test_each_frame_advances_time_and_resubmits(host, theme):
    field = make_field(host, theme)
    field.mount()

    for _ in range(10):
        assert host.scheduler.run_frame() == 1

    assert field.time == pytest.approx(11 * 0.005)
    assert host.surface.clear_count == 11
    assert host.scheduler.pending_count == 1
    # Only the latest frame stays on the surface
    assert len(host.surface.circles) == 80


def test_theme_is_read_every_frame(host, theme):
    field = make_field(host, theme)
    field.mount()
    assert {c[3] for c in host.surface.circles} == {LIGHT_FILL}

    theme.set_dark(True)
    host.scheduler.run_frame()
    assert {c[3] for c in host.surface.circles} == {DARK_FILL}

    theme.toggle()
    host.scheduler.run_frame()
    assert {c[3] for c in host.surface.circles} == {LIGHT_FILL}


def test_dark_fill_string(host):
    field = make_field(host, ThemeState(is_dark=True))
    field.mount()
    assert host.surface.circles[0][3] == 'rgba(255, 255, 255, 0.25)'


def test_drawn_positions_stay_near_base(host, theme):
    field = make_field(host, theme)
    field.mount()
    for _ in range(50):
        host.scheduler.run_frame()
        for particle, (x, y, radius, _) in zip(field.particles, host.surface.circles):
            assert radius == 1.5
            assert math.hypot(x - particle.base_x, y - particle.base_y) <= 8 * math.sqrt(2) + 1e-9


def test_unmount_right_after_mount_stops_drawing(host, theme):
    field = make_field(host, theme)
    field.mount()
    draws = host.surface.draw_count

    field.unmount()
    host.scheduler.run_frames(5)

    assert host.surface.draw_count == draws
    assert host.scheduler.pending_count == 0
    assert host.resize_listeners == []
    assert field.particles == []


def test_unmount_twice_is_safe(host, theme):
    field = make_field(host, theme)
    field.mount()
    field.unmount()
    field.unmount()
    assert host.scheduler.pending_count == 0
    assert host.scheduler.run_frame() == 0


def test_unmount_without_mount_is_safe(host, theme):
    make_field(host, theme).unmount()
    assert host.scheduler.pending_count == 0


def test_stale_frame_callback_after_unmount_does_nothing(host, theme):
    field = make_field(host, theme)
    field.mount()
    field.unmount()
    draws = host.surface.draw_count

    field.step()

    assert host.surface.draw_count == draws
    assert host.scheduler.pending_count == 0


def test_missing_surface_renders_nothing(theme):
    host = HeadlessHost(800, 600, surface=None)
    field = make_field(host, theme)
    field.mount()

    assert field.mounted is False
    assert field.particles == []
    assert host.scheduler.pending_count == 0
    assert host.resize_listeners == []
    field.unmount()


def test_resize_keeps_original_grid(host, theme):
    field = make_field(host, theme)
    field.mount()
    before = [p.base_position for p in field.particles]

    host.resize(1600, 1200)

    assert (host.surface.width, host.surface.height) == (1600, 1200)
    assert [p.base_position for p in field.particles] == before


def test_resize_can_regenerate_grid(host, theme):
    field = make_field(host, theme, regenerate_on_resize=True)
    field.mount()

    host.resize(1600, 1200)

    assert len(field.particles) == 20 * 15


def test_mount_twice_does_not_double_the_loop(host, theme):
    field = make_field(host, theme)
    field.mount()
    field.mount()
    assert host.scheduler.pending_count == 1
    assert len(host.resize_listeners) == 1


def test_context_manager_mounts_and_unmounts(host, theme):
    with make_field(host, theme) as field:
        assert field.mounted
    assert not field.mounted
    assert host.scheduler.pending_count == 0


def test_scheduler_defers_callbacks_requested_during_a_frame():
    scheduler = FrameScheduler()
    calls = []

    def tick():
        calls.append(len(calls))
        scheduler.request_frame(tick)

    scheduler.request_frame(tick)
    assert scheduler.run_frame() == 1
    assert scheduler.run_frame() == 1
    assert calls == [0, 1]


def test_scheduler_ignores_unknown_cancel():
    scheduler = FrameScheduler()
    scheduler.cancel_frame(123)
    frame_id = scheduler.request_frame(lambda: None)
    scheduler.cancel_frame(frame_id)
    assert scheduler.run_frame() == 0


def test_theme_state_notifies_on_change_only():
    seen = []
    theme = ThemeState()
    theme.subscribe(seen.append)
    theme.set_dark(False)
    theme.set_dark(True)
    theme.toggle()
    theme.unsubscribe(seen.append)
    theme.toggle()
    assert seen == [True, False]
    assert ThemeState.from_name('dark').is_dark
    assert not ThemeState.from_name('light').is_dark


def test_render_background_svg():
    svg = render_background_svg(800, 600, dark=True, frames=3, seed=1)
    assert svg.startswith('<svg')
    assert 'width="800" height="600"' in svg
    assert svg.count('<circle') == 80
    assert 'rgba(255, 255, 255, 0.25)' in svg


def test_render_background_svg_is_reproducible_with_seed():
    assert render_background_svg(320, 240, seed=11) == render_background_svg(320, 240, seed=11)
