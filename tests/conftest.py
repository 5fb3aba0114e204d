"""Shared fixtures: small synthetic images written to tmp_path."""
import matplotlib

matplotlib.use("Agg")

import cv2
import numpy as np
import pytest


@pytest.fixture
def color_image():
    """64x48 BGR image with distinct values per channel and a vertical edge."""
    img = np.zeros((48, 64, 3), dtype=np.uint8)
    img[:, :, 0] = 30    # blue
    img[:, :, 1] = 120   # green
    img[:, :, 2] = 200   # red
    img[:, 32:] = 255
    return img


@pytest.fixture
def gray_image():
    img = np.zeros((48, 64), dtype=np.uint8)
    img[:, 32:] = 200
    return img


@pytest.fixture
def write_image(tmp_path):
    def _write(img, name="sample.png"):
        path = tmp_path / name
        assert cv2.imwrite(str(path), img)
        return path
    return _write
