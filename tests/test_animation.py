from flatpack.animation import Animation, HappyEnd
from flatpack.geometry import Rect, Vec2


def make(interval=0.1):
    anim = Animation(Vec2(0, 0), interval)
    anim.load_spritesheet("sheet.png", 16, 8)
    anim.add_animation("walk", 2, 3)
    anim.add_animation("idle", 0, 1)
    return anim


def test_frames_are_cells_of_the_row():
    anim = make()
    assert anim.animations["walk"] == [
        Rect(0, 16, 16, 8),
        Rect(16, 16, 16, 8),
        Rect(32, 16, 16, 8),
    ]


def test_spritesheet_sets_size():
    anim = make()
    assert (anim.width, anim.height) == (16.0, 8.0)


def test_unflipped_rect_is_mirror_of_flipped():
    anim = make()
    anim.set_animation("walk")
    anim.set_current_frame(1)
    mirrored = anim.texture_rect()
    anim.flipped = True
    plain = anim.texture_rect()
    assert plain == anim.animations["walk"][1]
    assert mirrored.left == plain.left + plain.width
    assert mirrored.width == -plain.width
    assert mirrored.top == plain.top


def test_texture_rect_none_without_animation():
    assert make().texture_rect() is None


def test_update_advances_and_wraps():
    anim = make()
    anim.set_animation("walk")
    seen = []
    for _ in range(3):
        anim.update(0.1)
        seen.append(anim.current_frame)
    assert seen == [1, 2, 0]


def test_short_updates_accumulate():
    anim = make(interval=1.0)
    anim.set_animation("walk")
    anim.update(0.4)
    assert anim.current_frame == 0
    anim.update(0.7)
    assert anim.current_frame == 1
    assert anim.frame_time == 0.0


def test_pause_and_resume():
    anim = make()
    anim.set_animation("walk")
    anim.pause()
    anim.update(1.0)
    assert anim.current_frame == 0
    anim.resume()
    anim.update(1.0)
    assert anim.current_frame == 1


def test_no_current_animation_does_nothing():
    anim = make()
    anim.update(5.0)
    assert anim.current_frame == 0
    assert anim.frame_time == 0.0


def test_set_current_frame_bounds():
    anim = make()
    anim.set_animation("walk")
    anim.set_current_frame(2)
    assert anim.current_frame == 2
    anim.set_current_frame(3)
    assert anim.current_frame == 2
    anim.set_current_frame(-1)
    assert anim.current_frame == 2


def test_set_animation_unknown_ignored_and_switch_resets():
    anim = make()
    anim.set_animation("walk")
    anim.set_current_frame(2)
    anim.set_animation("missing")
    assert anim.current_animation == "walk"
    assert anim.current_frame == 2
    anim.set_animation("idle")
    assert anim.current_animation == "idle"
    assert anim.current_frame == 0


def test_set_frame_interval():
    anim = make()
    anim.set_animation("walk")
    anim.set_frame_interval(2.0)
    anim.update(1.0)
    assert anim.current_frame == 0


def test_happy_end_setup():
    effect = HappyEnd(Vec2(5, 5))
    assert effect.priority_layer == 6
    assert len(effect.animations["go"]) == 5
    assert effect.current_animation == "go"
    assert effect.origin == Vec2(16, 16)


def test_happy_end_dies_on_last_frame():
    effect = HappyEnd(Vec2(0, 0))
    for _ in range(200):
        effect.update(0.05)
        if effect.should_be_dead:
            break
    assert effect.should_be_dead
    assert effect.current_frame == 4


def test_happy_end_alive_before_last_frame():
    effect = HappyEnd(Vec2(0, 0))
    while effect.current_frame != 4:
        effect.update(0.05)
        assert not effect.should_be_dead
    assert effect.animation_completed