import pytest

from fractalview.color import pixel_color
from fractalview.window import RenderWindow


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    win = RenderWindow("test", 16, 12, False)
    yield win
    win.close()


def _rgb(win, x, y):
    return tuple(win.canvas.get_at((x, y)))[:3]


def test_new_window_is_black(window):
    assert _rgb(window, 0, 0) == (0, 0, 0)
    assert _rgb(window, 15, 11) == (0, 0, 0)
    assert window.fullscreen is False


def test_draw_sets_pixel_color(window):
    window.draw(3, 4, 200, 1)
    assert _rgb(window, 3, 4) == pixel_color(200, 1)
    assert _rgb(window, 4, 4) == (0, 0, 0)


def test_draw_inside_point_is_black(window):
    window.draw(2, 2, 200, 1)
    window.draw(2, 2, 200, 0)
    assert _rgb(window, 2, 2) == (0, 0, 0)


def test_draw_outside_canvas_is_ignored(window):
    window.draw(16, 12, 200, 1)
    window.draw(-1, 0, 200, 1)
    assert _rgb(window, 15, 11) == (0, 0, 0)
    assert _rgb(window, 0, 0) == (0, 0, 0)


def test_clear_after_display_blanks_canvas(window):
    window.draw(1, 1, 220, 1)
    window.display()
    window.clear()
    assert _rgb(window, 1, 1) == (0, 0, 0)