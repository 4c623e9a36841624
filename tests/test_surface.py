import pytest

from tilebrush.surface import Color, Rectangle, Surface


class RecordingSurface(Surface):
    def __init__(self, color=Color(0.1, 0.2, 0.3, 0.4), rects=None):
        self.color = color
        self.rects = rects if rects is not None else []
        self.calls = []

    def draw_dab(self, x, y, radius, color_r, color_g, color_b, opaque, hardness,
                 softness, alpha_eraser, aspect_ratio, angle, lock_alpha, colorize,
                 posterize, posterize_num, paint):
        self.calls.append(("draw_dab", x, y, radius))
        return radius > 0

    def get_color(self, x, y, radius, paint):
        self.calls.append(("get_color", x, y, radius, paint))
        return self.color

    def begin_atomic(self):
        self.calls.append(("begin",))

    def end_atomic(self, max_rectangles=1):
        self.calls.append(("end", max_rectangles))
        return list(self.rects[:max_rectangles])


def test_surface_is_abstract():
    with pytest.raises(TypeError):
        Surface()


def test_get_alpha_returns_alpha_and_samples_with_paint_one():
    surface = RecordingSurface(color=Color(0.5, 0.5, 0.5, 0.75))
    assert surface.get_alpha(4.0, 5.0, 2.0) == 0.75
    assert surface.calls == [("get_color", 4.0, 5.0, 2.0, 1.0)]


def test_atomic_brackets_and_collects_rectangles():
    rects = [Rectangle(0, 0, 4, 4), Rectangle(10, 10, 2, 2)]
    surface = RecordingSurface(rects=rects)
    with surface.atomic(2) as changed:
        surface.draw_dab(1, 2, 3, 0, 0, 0, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0)
        assert changed == []
    assert changed == rects
    assert surface.calls[0] == ("begin",)
    assert surface.calls[-1] == ("end", 2)


def test_atomic_ends_even_on_error():
    surface = RecordingSurface(rects=[Rectangle(3, 4, 5, 6)])
    context = surface.atomic(1)
    with pytest.raises(RuntimeError):
        with context as changed:
            assert changed == []
            raise RuntimeError("boom")
    assert surface.calls == [("begin",), ("end", 1)]


def test_color_unpacks():
    r, g, b, a = Color(0.1, 0.2, 0.3, 0.4)
    assert (r, g, b, a) == (0.1, 0.2, 0.3, 0.4)


def test_empty_rectangle_expands_to_single_pixel():
    rect = Rectangle()
    rect.expand_to_include_point(7, -3)
    assert rect == Rectangle(7, -3, 1, 1)


def test_rectangle_expands_in_all_directions():
    rect = Rectangle()
    rect.expand_to_include_point(5, 5)
    rect.expand_to_include_point(8, 9)
    rect.expand_to_include_point(2, 1)
    assert (rect.x, rect.y) == (2, 1)
    assert rect.x + rect.width - 1 == 8
    assert rect.y + rect.height - 1 == 9


def test_point_inside_does_not_change_rectangle():
    rect = Rectangle(0, 0, 10, 10)
    rect.expand_to_include_point(4, 4)
    assert rect == Rectangle(0, 0, 10, 10)


def test_expand_to_include_rect_covers_both():
    rect = Rectangle(0, 0, 2, 2)
    rect.expand_to_include_rect(Rectangle(5, 6, 3, 4))
    assert (rect.x, rect.y) == (0, 0)
    assert rect.x + rect.width == 8
    assert rect.y + rect.height == 10


def test_expand_to_include_empty_rect_is_noop():
    rect = Rectangle(1, 1, 2, 2)
    rect.expand_to_include_rect(Rectangle(50, 50, 0, 0))
    assert rect == Rectangle(1, 1, 2, 2)


def test_empty_rect_into_empty_stays_empty():
    rect = Rectangle()
    rect.expand_to_include_rect(Rectangle())
    assert rect.is_empty