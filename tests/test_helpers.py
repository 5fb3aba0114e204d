"""
Input validation, decoding and downscaling.
"""

import numpy as np
import pytest

from cvbasics import helpers
from cvbasics.config import LoadConfig
from cvbasics.helpers import (
    ImageDecodeError,
    ImageInputError,
    ImageNotFoundError,
    UnsupportedFormatError,
    load_and_prepare,
    load_image_bgr,
    resize_to_fit,
    validate_image_path,
)


class TestValidateImagePath:

    def test_existing_supported_file(self, write_image, color_image):
        path = write_image(color_image)
        assert validate_image_path(str(path)) == path

    def test_surrounding_quotes_are_stripped(self, write_image, color_image):
        path = write_image(color_image)
        assert validate_image_path(f'"{path}"') == path
        assert validate_image_path(f"'{path}'\n") == path

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageNotFoundError, match="File not found"):
            validate_image_path(str(tmp_path / "nope.png"))

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(ImageNotFoundError):
            validate_image_path(str(tmp_path))

    def test_empty_path(self):
        with pytest.raises(ImageNotFoundError):
            validate_image_path("")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "notes.gif"
        path.write_bytes(b"GIF89a")
        with pytest.raises(UnsupportedFormatError, match="Unsupported file format"):
            validate_image_path(str(path))

    def test_tif_short_form_is_rejected(self, tmp_path):
        path = tmp_path / "scan.tif"
        path.write_bytes(b"II*\x00")
        with pytest.raises(UnsupportedFormatError):
            validate_image_path(str(path))

    def test_extension_check_is_case_insensitive(self, write_image, color_image, tmp_path):
        src = write_image(color_image, "upper.png")
        upper = tmp_path / "UPPER.PNG"
        src.rename(upper)
        assert validate_image_path(str(upper)) == upper

    def test_missing_checked_before_extension(self, tmp_path):
        with pytest.raises(ImageNotFoundError):
            validate_image_path(str(tmp_path / "missing.gif"))

    def test_errors_share_base_class(self):
        assert issubclass(ImageNotFoundError, ImageInputError)
        assert issubclass(ImageNotFoundError, FileNotFoundError)
        assert issubclass(UnsupportedFormatError, ValueError)
        assert issubclass(ImageDecodeError, ImageInputError)


class TestLoadImage:

    def test_loads_bgr_uint8(self, write_image, color_image):
        img = load_image_bgr(write_image(color_image))
        assert img.shape == color_image.shape
        assert img.dtype == np.uint8
        assert np.array_equal(img, color_image)

    def test_grayscale_file_is_decoded_as_color(self, write_image, gray_image):
        img = load_image_bgr(write_image(gray_image))
        assert img.shape == gray_image.shape + (3,)

    def test_corrupt_file_raises_decode_error(self, tmp_path):
        path = tmp_path / "broken.jpg"
        path.write_bytes(b"definitely not a jpeg")
        with pytest.raises(ImageDecodeError, match="Failed to read the image"):
            load_image_bgr(path)


class TestResizeToFit:

    def test_small_image_untouched(self):
        img = np.zeros((100, 200, 3), dtype=np.uint8)
        out, scale = resize_to_fit(img, 1920, 1080)
        assert out is img
        assert scale == 1.0

    def test_exact_limit_untouched(self):
        img = np.zeros((1080, 1920, 3), dtype=np.uint8)
        out, scale = resize_to_fit(img, 1920, 1080)
        assert out.shape == (1080, 1920, 3)
        assert scale == 1.0

    def test_4k_scales_to_full_hd(self):
        img = np.zeros((2160, 3840, 3), dtype=np.uint8)
        out, scale = resize_to_fit(img, 1920, 1080)
        assert out.shape == (1080, 1920, 3)
        assert scale == pytest.approx(0.5)

    @pytest.mark.parametrize("height,width", [(1000, 4000), (3000, 1000), (1200, 1900)])
    def test_fits_and_keeps_aspect_ratio(self, height, width):
        img = np.zeros((height, width, 3), dtype=np.uint8)
        out, scale = resize_to_fit(img, 1920, 1080)
        new_h, new_w = out.shape[:2]
        assert new_w <= 1920
        assert new_h <= 1080
        assert scale == pytest.approx(min(1920 / width, 1080 / height))
        assert new_w / new_h == pytest.approx(width / height, rel=0.01)

    def test_tall_image_limited_by_height(self):
        img = np.zeros((3000, 1000, 3), dtype=np.uint8)
        out, _ = resize_to_fit(img, 1920, 1080)
        assert out.shape[0] == 1080

    def test_one_pixel_high_strip_keeps_a_row(self):
        img = np.zeros((1, 4000, 3), dtype=np.uint8)
        out, scale = resize_to_fit(img, 1920, 1080)
        assert out.shape == (1, 1920, 3)
        assert scale == pytest.approx(0.48)

    def test_one_pixel_wide_strip_keeps_a_column(self):
        img = np.zeros((4000, 1, 3), dtype=np.uint8)
        out, _ = resize_to_fit(img, 1920, 1080)
        assert out.shape == (1080, 1, 3)


class TestLoadAndPrepare:

    def test_small_image_not_resized(self, write_image, color_image):
        loaded = load_and_prepare(str(write_image(color_image)))
        assert not loaded.resized
        assert loaded.original_size == (64, 48)

    def test_large_image_resized_with_custom_limits(self, write_image, color_image):
        cfg = LoadConfig(max_width=32, max_height=32)
        loaded = load_and_prepare(str(write_image(color_image)), cfg)
        assert loaded.resized
        assert loaded.image.shape[:2] == (24, 32)
        assert loaded.original_size == (64, 48)

    def test_missing_file_never_decodes(self, tmp_path, monkeypatch):
        def boom(path):
            raise AssertionError("decode attempted")

        monkeypatch.setattr(helpers, "load_image_bgr", boom)
        with pytest.raises(ImageNotFoundError):
            load_and_prepare(str(tmp_path / "absent.jpg"))

    def test_bad_extension_never_decodes(self, tmp_path, monkeypatch):
        path = tmp_path / "doc.txt"
        path.write_text("hello")

        def boom(path):
            raise AssertionError("decode attempted")

        monkeypatch.setattr(helpers, "load_image_bgr", boom)
        with pytest.raises(UnsupportedFormatError):
            load_and_prepare(str(path))
