import logging

from readme_motion.core.models import TypewriterSpec
from readme_motion.widgets.typewriter import line_windows, render_svg, reveal_width, total_ms


def test_second_line_starts_after_first_line_and_pause():
    windows = line_windows(["ab", "c"], 100, 500)
    assert windows[0].begin == 0
    assert windows[1].begin_ms == 700
    assert windows[1].begin == 0.7


def test_windows_do_not_overlap():
    windows = line_windows(["hello", "hi", "readme"], 60, 1200)
    for prev, nxt in zip(windows, windows[1:]):
        assert prev.end_ms == nxt.begin_ms


def test_total_duration_is_sum_of_windows():
    windows = line_windows(["ab", "c"], 100, 500)
    assert total_ms(windows) == 1300


def test_speed_and_pause_are_clamped():
    spec = TypewriterSpec(speed_ms=1, pause_ms=5)
    assert spec.speed_ms == 10
    assert spec.pause_ms == 200


def test_empty_lines_default():
    assert TypewriterSpec(lines=()).lines == ("readme-motion",)


def test_reveal_width_heuristic():
    assert reveal_width("abcd", 10) == 16 + 0.6 * 10 * 4


def test_markup_sequences_lines_on_loop_clock(palette):
    svg = render_svg(TypewriterSpec(lines=("ab", "c"), speed_ms=100, pause_ms=500), palette)
    assert 'begin="tw-loop.begin+0s"' in svg
    assert 'begin="tw-loop.begin+0.7s"' in svg
    assert 'begin="0s;tw-loop.end" dur="1.3s"' in svg
    assert svg.count('<clipPath id="tw-clip-') == 2
    assert palette.accent in svg


def test_lines_are_escaped(palette):
    svg = render_svg(TypewriterSpec(lines=("<b> & co",)), palette)
    assert "&lt;b&gt; &amp; co" in svg
    assert "<b>" not in svg


def test_deterministic(palette):
    spec = TypewriterSpec(lines=("one", "two"))
    assert render_svg(spec, palette) == render_svg(spec, palette)


def test_loop_length_logged_at_debug(palette, caplog):
    caplog.set_level(logging.DEBUG, logger="readme_motion")
    render_svg(TypewriterSpec(lines=("ab", "c"), speed_ms=100, pause_ms=500), palette)
    assert "typewriter: 2 line(s), loop 1.3s" in caplog.text
