import logging
import math

import pytest

from latren.postprocessing import (
    PostProcessing,
    box_blur,
    fill,
    gaussian_blur,
    normalize,
)


def test_defaults():
    pp = PostProcessing()
    assert pp.vignette.size == 0.75
    assert pp.kernel.offset == pytest.approx(1 / 300)
    assert not pp.kernel.is_active
    assert (pp.gamma, pp.contrast, pp.brightness, pp.saturation) == (1.0, 1.0, 1.0, 1.0)


def test_fill_and_box_blur():
    assert fill(3, 2.0) == [2.0] * 9
    kernel = box_blur(5)
    assert len(kernel) == 25
    assert math.fsum(kernel) == pytest.approx(1.0)
    assert len(set(kernel)) == 1


def test_normalize_sums_to_one():
    result = normalize([1.0, 2.0, 3.0, 4.0])
    assert math.fsum(result) == pytest.approx(1.0)
    assert result[3] == pytest.approx(4 * result[0])


@pytest.mark.parametrize("size", [3, 5, 7])
def test_gaussian_blur_is_normalized_and_peaks_at_last_cell(size):
    kernel = gaussian_blur(size)
    assert len(kernel) == size * size
    assert math.fsum(kernel) == pytest.approx(1.0)
    assert max(kernel) == kernel[-1]
    assert min(kernel) == kernel[0]


def test_gaussian_blur_sigma_changes_spread():
    narrow = gaussian_blur(5, 1)
    wide = gaussian_blur(5, 5)
    assert narrow[-1] > wide[-1]


@pytest.mark.parametrize(
    "size,attr,flag",
    [(3, "kernel3x3", "use_kernel3x3"), (5, "kernel5x5", "use_kernel5x5"), (7, "kernel7x7", "use_kernel7x7")],
)
def test_apply_kernel_by_size(size, attr, flag):
    pp = PostProcessing()
    kernel = box_blur(size)
    pp.apply_kernel(kernel)
    assert getattr(pp.kernel, attr) == kernel
    assert getattr(pp.kernel, flag) is True
    assert pp.kernel.is_active is True


def test_apply_kernel_with_factor():
    pp = PostProcessing()
    pp.apply_kernel(fill(3, 1.0), 0.5)
    assert pp.kernel.kernel3x3 == [0.5] * 9


def test_apply_kernel_invalid_size_is_ignored(caplog):
    pp = PostProcessing()
    with caplog.at_level(logging.WARNING):
        pp.apply_kernel([1.0] * 4)
    assert pp.kernel.is_active is False
    assert pp.kernel.kernel3x3 is None
    assert "Invalid kernel size" in caplog.text