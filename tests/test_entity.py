from flatpack.entity import Background, Entity
from flatpack.geometry import Rect, Vec2


class FakeWorld:
    def __init__(self, bounds):
        self._bounds = bounds

    def part_bounds(self):
        return self._bounds


def test_new_entity_defaults():
    e = Entity((3.0, 4.0))
    assert e.position == Vec2(3.0, 4.0)
    assert e.velocity == Vec2(0.0, 0.0)
    assert e.should_be_dead is False
    assert e.priority_layer == 0


def test_on_screen_depends_on_world_part():
    e = Entity(Vec2(100.0, 100.0))
    e.world = FakeWorld(Rect(0.0, 0.0, 800.0, 600.0))
    assert e.is_on_screen()
    e.world = FakeWorld(Rect(800.0, 0.0, 800.0, 600.0))
    assert not e.is_on_screen()


def test_without_world_not_on_screen():
    assert Entity((0.0, 0.0)).is_on_screen() is False


def test_bounds_of_unrotated_entity():
    e = Entity((10.0, 20.0))
    e.width, e.height = 30.0, 40.0
    assert e.bounds() == Rect(10.0, 20.0, 30.0, 40.0)


def test_bounds_enclose_rotated_corners():
    e = Entity((50.0, 50.0))
    e.width, e.height = 20.0, 10.0
    e.origin = Vec2(10.0, 5.0)
    e.rotation = 30.0
    box = e.bounds()
    for corner in e.corners():
        assert box.left - 1e-9 <= corner.x <= box.right + 1e-9
        assert box.top - 1e-9 <= corner.y <= box.bottom + 1e-9


def test_background_layer_and_visibility():
    bg = Background(0.0, 0.0, 640.0, 480.0, "imgs/background.png")
    assert bg.priority_layer == -1000
    assert bg.is_on_screen() is True
    assert bg.texture_path == "imgs/background.png"


def test_background_bounds_match_size():
    bg = Background(5.0, 6.0, 640.0, 480.0, "imgs/background.png")
    assert bg.bounds() == Rect(5.0, 6.0, 640.0, 480.0)