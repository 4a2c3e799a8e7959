import pytest

from anydrawer import DrawerConfig, Size, clamp_drag_offset, default_drawer_width, resolve_drawer_width


@pytest.mark.parametrize(
    "screen_width, expected",
    [(0, 260), (359, 260), (360, 300), (599, 300), (600, 400), (1920, 400)],
)
def test_default_drawer_width_breakpoints(screen_width, expected):
    assert default_drawer_width(screen_width) == expected


def test_resolve_uses_default_when_no_callback():
    assert resolve_drawer_width(DrawerConfig(), Size(800, 600)) == 400


def test_resolve_uses_width_by_size():
    config = DrawerConfig(width_by_size=lambda size: size.width / 2)
    assert resolve_drawer_width(config, Size(1000, 800)) == 500


def test_resolve_caps_at_max_drawer_extent():
    config = DrawerConfig(max_drawer_extent=350)
    assert resolve_drawer_width(config, Size(1200, 800)) == 350


def test_resolve_keeps_backdrop_visible():
    # Default 260 on a 280px screen would leave only 20px of backdrop.
    assert resolve_drawer_width(DrawerConfig(), Size(280, 500)) == 250
    assert resolve_drawer_width(DrawerConfig(), Size(10, 500)) == 0


def test_drag_offset_disabled():
    assert clamp_drag_offset(DrawerConfig(), 120) == 0


def test_drag_offset_clamped():
    config = DrawerConfig(drag_enabled=True)
    assert clamp_drag_offset(config, -5) == 0
    assert clamp_drag_offset(config, 120) == 120
    assert clamp_drag_offset(config, 900) == 300
    assert clamp_drag_offset(config.copy_with(max_drag_extent=None), 900) == 900
