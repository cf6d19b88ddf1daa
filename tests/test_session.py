"""Tests for the painting session controller."""

import numpy as np
import pytest

from errors import SurfaceUnavailableError
from models import AnimatorConfig, Phase
from playback import ArraySurface, PaintingSession


class UnreadySurface(ArraySurface):
    ready = False


@pytest.fixture
def session(clock, surface):
    return PaintingSession(clock, surface)


def test_load_without_surface_raises(clock, flat_image):
    session = PaintingSession(clock)
    with pytest.raises(SurfaceUnavailableError):
        session.load_image(flat_image(4, 4))
    assert session.path_data is None
    assert session.phase is Phase.IDLE


def test_failed_load_leaves_previous_session_untouched(session, clock, split_image, flat_image):
    session.load_image(split_image(60, 60))
    session.set_speed(10)
    session.start()
    clock.advance()
    path_data = session.path_data
    cursor = session.state.cursor
    old_surface = session.surface

    session.surface = UnreadySurface()
    with pytest.raises(SurfaceUnavailableError):
        session.load_image(flat_image(30, 30))

    assert session.path_data is path_data
    assert session.phase is Phase.OUTLINE
    assert session.state.cursor == cursor
    assert clock.pending == 1
    assert old_surface.width == 60


def test_load_prepares_without_auto_start(session, clock, surface, split_image):
    result = session.load_image(split_image(10, 8))

    assert session.path_data is result.path_data
    assert session.phase is Phase.IDLE
    assert clock.pending == 0
    assert (surface.width, surface.height) == (10, 8)
    assert (surface.buffer == 255).all()


def test_load_downscales_to_working_resolution(clock, surface, split_image):
    session = PaintingSession(clock, surface, AnimatorConfig(max_size=10))

    session.load_image(split_image(40, 20))

    assert (session.path_data.width, session.path_data.height) == (10, 5)
    assert (surface.width, surface.height) == (10, 5)
    assert session.path_data.fill_count == 50


def test_auto_start(clock, surface, split_image):
    session = PaintingSession(clock, surface, AnimatorConfig(auto_start=True))

    session.load_image(split_image(10, 10))

    assert session.phase is Phase.OUTLINE
    assert clock.pending == 1


def test_start_without_image_is_silent_no_op(session, clock):
    assert session.start() is False
    assert session.phase is Phase.IDLE
    assert clock.pending == 0


def test_new_image_mid_animation_cancels_pending_tick(session, clock, split_image, flat_image):
    session.load_image(split_image(30, 30))
    session.start()
    clock.advance()
    assert clock.pending == 1

    session.load_image(flat_image(6, 4))

    assert clock.pending == 0
    assert session.phase is Phase.IDLE
    assert session.state.cursor == 0
    assert (session.surface.width, session.surface.height) == (6, 4)
    clock.advance(3)
    assert (session.surface.buffer == 255).all()


def test_pause_and_resume_keep_phase_and_cursor(session, clock, split_image):
    session.load_image(split_image(90, 90))
    session.set_speed(10)
    session.start()
    clock.advance()
    cursor = session.state.cursor

    assert session.toggle_pause() is True
    clock.advance(4)
    assert session.phase is Phase.OUTLINE
    assert session.state.cursor == cursor

    assert session.toggle_pause() is False
    assert clock.pending == 1


def test_reset_retains_path_data_and_is_idempotent(session, clock, split_image):
    session.load_image(split_image(12, 12))
    path_data = session.path_data
    session.start()
    clock.advance(2)

    session.reset()
    once = (session.phase, session.state.cursor, session.progress, session.state.paused)
    buffer_once = session.surface.buffer.copy()
    session.reset()

    assert (session.phase, session.state.cursor, session.progress, session.state.paused) == once
    assert np.array_equal(session.surface.buffer, buffer_once)
    assert once == (Phase.IDLE, 0, 0, False)
    assert session.path_data is path_data
    assert (session.surface.buffer == 255).all()


def test_replay_after_complete(session, clock, split_image):
    session.load_image(split_image(9, 9))
    session.set_speed(500)
    session.start()
    clock.run_until_idle()
    assert session.phase is Phase.COMPLETE
    assert session.progress == 100

    assert session.start()

    assert session.phase is Phase.OUTLINE
    assert session.progress == 0
    assert (session.surface.buffer == 255).all()
    clock.run_until_idle()
    assert session.phase is Phase.COMPLETE


@pytest.mark.parametrize("requested, effective", [(9999, 500), (1, 10), (-5, 10), (250, 250)])
def test_set_speed_clamps(session, requested, effective):
    assert session.set_speed(requested) == effective
    assert session.state.speed == effective


def test_progress_sink_sees_every_phase(clock, surface, split_image):
    seen = []
    session = PaintingSession(
        clock, surface, progress_sink=lambda phase, progress: seen.append(phase)
    )
    session.load_image(split_image(12, 12))
    session.set_speed(50)
    session.start()
    clock.run_until_idle()

    phases = list(dict.fromkeys(seen))
    assert phases == [Phase.IDLE, Phase.OUTLINE, Phase.COLORING, Phase.COMPLETE]


def test_attach_surface_resizes_and_resets(session, clock, split_image):
    session.load_image(split_image(12, 8))
    session.start()
    clock.advance()

    replacement = ArraySurface()
    session.attach_surface(replacement)

    assert session.surface is replacement
    assert (replacement.width, replacement.height) == (12, 8)
    assert session.phase is Phase.IDLE
    assert clock.pending == 0
    assert session.start()
