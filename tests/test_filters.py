"""
Unit tests for the filter catalog: blur, sharpen, edge detection and
brightness.
"""

import numpy as np
import pytest

from raster import (
    InvalidParameter,
    PixelBuffer,
    adjust_brightness,
    blur,
    blur_kernel,
    edge_detect,
    edge_kernel,
    sharpen,
    sharpen_kernel,
    to_grayscale,
)
from raster.filters import blur_kernel_size


def single_bright_pixel(value, background=0, size=5):
    arr = np.full((size, size), background, dtype=np.uint8)
    arr[size // 2, size // 2] = value
    return PixelBuffer.from_array(arr)


class TestBlurKernel:
    """Tests for blur kernel sizing and normalization."""

    @pytest.mark.parametrize("intensity,expected", [
        (1.0, 11),
        (0.0, 3),
        (0.1, 3),
        (0.3, 3),
        (0.4, 5),
        (0.5, 5),
        (0.6, 7),
        (2.0, 21),
        (-1.0, 3),
    ])
    def test_kernel_size(self, intensity, expected):
        assert blur_kernel_size(intensity) == expected
        assert blur_kernel(intensity).size == expected

    @pytest.mark.parametrize("intensity", [0.0, 0.25, 0.5, 0.75, 1.0, 1.3, 2.5])
    def test_weights_sum_to_one(self, intensity):
        kernel = blur_kernel(intensity)
        assert abs(kernel.total - 1.0) < 1e-6

    def test_weights_are_uniform(self):
        kernel = blur_kernel(0.5)
        assert np.allclose(kernel.weights, 1 / 25)

    @pytest.mark.parametrize("intensity", [float("nan"), float("inf")])
    def test_non_finite_intensity_raises(self, intensity):
        with pytest.raises(InvalidParameter, match="finite"):
            blur_kernel(intensity)

    def test_largest_kernel_is_accepted(self):
        assert blur_kernel_size(10.0) == 101

    @pytest.mark.parametrize("intensity", [10.3, 1e5])
    def test_oversized_kernel_raises(self, intensity):
        with pytest.raises(InvalidParameter, match="limit is 101x101"):
            blur_kernel_size(intensity)

    def test_blur_rejects_oversized_kernel_before_convolving(self):
        with pytest.raises(InvalidParameter):
            blur(PixelBuffer.create(4, 4, 3), intensity=1e5)


class TestBlur:
    """Tests for blur()."""

    def test_uniform_image_unchanged(self):
        buf = PixelBuffer.create(8, 6, 3, fill=77)
        assert blur(buf) == buf

    def test_spreads_single_pixel(self):
        result = blur(single_bright_pixel(90), intensity=0.3).to_array()
        expected = np.zeros((5, 5), dtype=np.uint8)
        expected[1:4, 1:4] = 10
        assert np.array_equal(result, expected)

    def test_reduces_contrast(self):
        checker = np.indices((10, 10)).sum(axis=0) % 2 * 255
        buf = PixelBuffer.from_array(checker.astype(np.uint8))
        result = blur(buf, intensity=0.3)
        assert result.to_array().astype(float).std() < buf.to_array().astype(float).std()

    def test_pure_function_no_mutation(self, random_rgb):
        before = random_rgb.clone()
        _ = blur(random_rgb, 0.3)
        assert random_rgb == before


class TestSharpen:
    """Tests for sharpen()."""

    def test_kernel_weights_sum_to_one(self):
        assert sharpen_kernel().total == pytest.approx(1.0)

    def test_white_image_stays_white(self):
        white = PixelBuffer.create(3, 3, 3, fill=255)
        assert sharpen(white) == white

    def test_amplifies_local_contrast(self):
        result = sharpen(single_bright_pixel(100, background=50)).to_array()
        assert result[2, 2] == 255  # 5*100 - 4*50
        assert result[1, 2] == 0    # 5*50 - 100 - 3*50
        assert result[0, 0] == 50

    def test_keeps_channel_count(self, random_rgba):
        assert sharpen(random_rgba).channels == 4


class TestEdgeDetect:
    """Tests for edge_detect()."""

    def test_kernel_weights_sum_to_zero(self):
        assert edge_kernel().total == pytest.approx(0.0)

    def test_output_is_single_channel(self, random_rgb):
        result = edge_detect(random_rgb)
        assert result.channels == 1
        assert result.size == random_rgb.size

    def test_uniform_image_has_no_edges(self):
        buf = PixelBuffer.create(6, 6, 3, fill=180)
        assert not edge_detect(buf).samples.any()

    def test_responds_to_isolated_pixel(self):
        result = edge_detect(single_bright_pixel(255)).to_array()
        assert result[2, 2] == 255
        assert result[0, 0] == 0

    def test_equals_edge_detect_of_grayscale(self, random_rgb):
        assert edge_detect(random_rgb) == edge_detect(to_grayscale(random_rgb))


class TestAdjustBrightness:
    """Tests for adjust_brightness()."""

    def test_scales_rgb_samples(self):
        buf = PixelBuffer.create(2, 2, 3, fill=200)
        assert np.all(adjust_brightness(buf, 0.5).samples == 100)

    def test_factor_one_is_identity(self, random_rgb):
        assert adjust_brightness(random_rgb, 1.0) == random_rgb

    def test_factor_zero_is_black(self, random_gray):
        assert not adjust_brightness(random_gray, 0.0).samples.any()

    def test_rgba_scales_only_alpha(self):
        buf = PixelBuffer.from_array(np.full((2, 2, 4), [10, 20, 30, 200], dtype=np.uint8))
        result = adjust_brightness(buf, 0.5).to_array()
        assert result[0, 0].tolist() == [10, 20, 30, 100]

    @pytest.mark.parametrize("factor", [-0.1, 1.5, float("nan")])
    def test_invalid_factor_raises(self, random_rgb, factor):
        with pytest.raises(InvalidParameter, match="within"):
            adjust_brightness(random_rgb, factor)
