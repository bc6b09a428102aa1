import pytest

from flatpack.cutscene import CutScene


def test_starts_transparent():
    scene = CutScene([(100, 50)], (200, 200), 2.0, 1.0)
    assert scene.alpha == 0
    assert scene.current_frame == 0


def test_fade_in_rises():
    scene = CutScene([(100, 50)], (200, 200), 2.0, 1.0)
    scene.update(0.25)
    early = scene.alpha
    scene.update(0.25)
    assert 0 < early < scene.alpha <= 255


def test_fade_in_and_out_are_symmetric():
    scene = CutScene([(100, 50)], (200, 200), 2.0, 1.0)
    scene.update(0.5)
    fading_in = scene.alpha
    scene.update(1.0)
    fading_out = scene.alpha
    assert fading_in == fading_out
    assert 0 < fading_in < 255


def test_full_lifecycle():
    scene = CutScene([(100, 50), (100, 50)], (200, 200), 1.0, 0.5)
    assert scene.update(1.0) is False
    assert scene.is_paused
    assert scene.update(0.5) is False
    assert scene.current_frame == 1
    assert scene.alpha == 0
    assert scene.update(1.0) is False
    assert scene.update(0.5) is True
    assert scene.is_finished
    assert scene.update(10.0) is True


def test_pause_waits_for_duration():
    scene = CutScene([(100, 50), (100, 50)], (200, 200), 1.0, 2.0)
    scene.update(1.0)
    scene.update(1.0)
    assert scene.is_paused
    assert scene.current_frame == 0


def test_frame_scale_fits_window():
    scene = CutScene([(100, 50)], (200, 200), 1.0, 1.0)
    assert scene.frame_scale() == pytest.approx(2.0)


def test_frame_scale_follows_current_frame():
    scene = CutScene([(100, 50), (400, 100)], (200, 200), 1.0, 0.0)
    scene.update(1.0)
    scene.update(0.0)
    assert scene.current_frame == 1
    assert scene.frame_scale() == pytest.approx(0.5)


def test_frame_scale_without_frames_raises():
    scene = CutScene([], (200, 200), 1.0, 1.0)
    with pytest.raises(IndexError):
        scene.frame_scale()