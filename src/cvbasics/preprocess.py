from __future__ import annotations
from typing import Dict, Optional

import cv2
import numpy as np

from .config import FilterConfig


class ImageTransformer:
    """Stateless OpenCV transforms (BGR or gray in, new array out)."""

    def __init__(self, config: Optional[FilterConfig] = None) -> None:
        self.config = config or FilterConfig()
        c = self.config
        if c.gaussian_ksize % 2 == 0 or c.gaussian_ksize < 1:
            raise ValueError("gaussian_ksize must be odd and >= 1")
        if c.box_ksize < 1:
            raise ValueError("box_ksize must be >= 1")
        if not 0 <= c.canny_low <= c.canny_high:
            raise ValueError("canny thresholds must satisfy 0 <= low <= high")

    @staticmethod
    def to_gray(img_bgr: np.ndarray) -> np.ndarray:
        if img_bgr.ndim == 2:
            return img_bgr.copy()
        return cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)

    @staticmethod
    def split_channels(img_bgr: np.ndarray) -> Optional[Dict[str, np.ndarray]]:
        """
        Isolate each color channel, keeping it in its own slot of a BGR image.
        Returns None for anything that is not a 3-channel image.
        """
        if img_bgr.ndim != 3 or img_bgr.shape[2] != 3:
            return None
        blue, green, red = cv2.split(img_bgr)
        zeros = np.zeros_like(blue)
        return {
            "red": cv2.merge([zeros, zeros, red]),
            "green": cv2.merge([zeros, green, zeros]),
            "blue": cv2.merge([blue, zeros, zeros]),
        }

    @staticmethod
    def equalize(gray: np.ndarray) -> np.ndarray:
        return cv2.equalizeHist(gray)

    def detect_edges(self, gray: np.ndarray) -> np.ndarray:
        return cv2.Canny(gray, self.config.canny_low, self.config.canny_high)

    def gaussian_blur(self, img: np.ndarray) -> np.ndarray:
        k = self.config.gaussian_ksize
        return cv2.GaussianBlur(img, (k, k), self.config.gaussian_sigma)

    def box_blur(self, img: np.ndarray) -> np.ndarray:
        k = self.config.box_ksize
        return cv2.blur(img, (k, k))

    def laplacian(self, gray: np.ndarray) -> np.ndarray:
        return cv2.Laplacian(gray, self.config.laplacian_ddepth)
