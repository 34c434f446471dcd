from __future__ import annotations

import pytest

from hueflow.contrast import BLACK, WHITE, contrast_ratio, is_compliant, relative_luminance


def test_relative_luminance_extremes() -> None:
    assert relative_luminance(BLACK) == 0.0
    assert relative_luminance(WHITE) == pytest.approx(1.0)


def test_contrast_ratio_symmetric() -> None:
    a = (0.1, 0.5, 0.77)
    b = (0.9, 0.2, 0.3)
    assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))


def test_contrast_ratio_same_color_is_one() -> None:
    assert contrast_ratio((0.3, 0.3, 0.3), (0.3, 0.3, 0.3)) == pytest.approx(1.0)


def test_contrast_ratio_black_white() -> None:
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)


def test_linearization_uses_wcag_knee() -> None:
    # 0.035 lies between the WCAG (0.03928) and sRGB (0.04045) knees.
    assert relative_luminance((0.035, 0.035, 0.035)) == pytest.approx(0.035 / 12.92)


def test_is_compliant_threshold() -> None:
    assert is_compliant(4.5)
    assert not is_compliant(4.49)
    assert is_compliant(3.0, threshold=3.0)
