import pytest
from pong.components import Size, Transform
from pong.geometry import Aabb2d, Playfield, bounding_box

def box(x, y, w, h):
    return Aabb2d.from_center_size(x, y, w, h)

def test_ball_inside_paddle_overlaps():
    ball = box(-365, 0, 20, 20)
    paddle = box(-370, 0, 20, 120)
    assert ball.intersects(paddle)
    assert paddle.intersects(ball)

def test_touching_edges_overlap():
    ball = box(-350, 0, 20, 20)
    paddle = box(-370, 0, 20, 120)
    assert ball.intersects(paddle)

def test_separated_boxes_do_not_overlap():
    ball = box(0, 0, 20, 20)
    paddle = box(-370, 0, 20, 120)
    assert not ball.intersects(paddle)

def test_vertical_separation():
    ball = box(-370, 200, 20, 20)
    paddle = box(-370, 0, 20, 120)
    assert not ball.intersects(paddle)

def test_corners():
    b = box(10, 20, 4, 6)
    assert b.min == (8, 17)
    assert b.max == (12, 23)

def test_bounding_box_from_entity(world):
    e = world.create_entity()
    e.add(Transform(x=5, y=-5))
    e.add(Size(width=10, height=30))

    assert bounding_box(e) == Aabb2d((5, -5), (5, 15))

def test_bounding_box_requires_components(world):
    e = world.create_entity()
    e.add(Transform())
    with pytest.raises(KeyError):
        bounding_box(e)

def test_playfield_resize():
    field = Playfield(800, 600)
    assert field.half_width == 400
    assert field.half_height == 300

    field.resize(1024, 768)
    assert (field.width, field.height) == (1024, 768)

@pytest.mark.parametrize("other_x, expected", [
    (5, True),
    (10, False),
    (6, True),
])
def test_half_extent_examples(other_x, expected):
    a = Aabb2d((0, 0), (3, 3))
    b = Aabb2d((other_x, 0), (3, 3))
    assert a.intersects(b) is expected
