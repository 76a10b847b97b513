from readme_motion.core.models import BadgeSpec
from readme_motion.widgets.badge import badge_layout, render_svg


def test_tone_selects_status_color(palette):
    svg = render_svg(BadgeSpec(label="build", value="failing", tone="bad"), palette)
    assert f'fill="{palette.bad}"' in svg
    assert palette.good not in svg


def test_unknown_tone_defaults_to_good():
    assert BadgeSpec(tone="meh").tone == "good"


def test_pulse_adds_oscillating_dot(palette):
    svg = render_svg(BadgeSpec(pulse=True), palette)
    assert "<circle" in svg
    assert 'attributeName="r"' in svg
    assert 'repeatCount="indefinite"' in svg


def test_static_without_pulse(palette):
    svg = render_svg(BadgeSpec(pulse=False), palette)
    assert "<circle" not in svg
    assert "<animate" not in svg


def test_width_estimated_from_text():
    layout = badge_layout(BadgeSpec(label="build", value="ok"))
    assert layout.width == (5 * 7 + 20) + (2 * 7 + 20)


def test_explicit_width_kept():
    assert badge_layout(BadgeSpec(width=300)).width == 300


def test_label_reduced_opacity_and_escaped(palette):
    svg = render_svg(BadgeSpec(label="a&b", value="<1>"), palette)
    assert 'opacity="0.7">a&amp;b</text>' in svg
    assert "&lt;1&gt;" in svg
