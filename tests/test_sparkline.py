import pytest

from readme_motion.core.models import SAMPLE_SERIES, SparklineSpec
from readme_motion.widgets.sparkline import PAD, clean_series, render_svg, spark_geometry


def test_zero_range_maps_to_one_height():
    geo = spark_geometry([5, 5, 5], 320, 80)
    ys = {y for _, y in geo.points}
    assert len(ys) == 1


def test_points_span_width_and_invert_y():
    geo = spark_geometry([0, 10], 320, 80)
    (x0, y0), (x1, y1) = geo.points
    assert x0 == PAD
    assert x1 == 320 - PAD
    assert y0 > y1


def test_single_point():
    geo = spark_geometry([4], 320, 80)
    assert len(geo.points) == 1


def test_path_length_is_diagonal_plus_per_point():
    geo = spark_geometry([1, 2, 3], 320, 80)
    # drawable box is 304 x 46
    assert geo.path_length == pytest.approx((304 ** 2 + 46 ** 2) ** 0.5 + 3 * 4)


def test_empty_data_uses_sample():
    assert SparklineSpec(data=()).data == SAMPLE_SERIES
    assert clean_series([]) == [float(v) for v in SAMPLE_SERIES]


def test_non_numeric_samples_dropped():
    assert clean_series([1, "x", None, "3"]) == [1.0, 3.0]


def test_markup_reveals_once(palette):
    svg = render_svg(SparklineSpec(data=(1, 3, 2), label="Stars & forks"), palette)
    assert 'attributeName="stroke-dashoffset"' in svg
    assert 'dur="1.4s" fill="freeze"' in svg
    assert "Stars &amp; forks" in svg
    assert palette.accent in svg
