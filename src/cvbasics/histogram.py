from __future__ import annotations
from typing import Optional

import cv2
import numpy as np

from .config import HistogramConfig


class HistogramPlotter:
    """Intensity histogram of a grayscale image, drawn as a line plot."""

    def __init__(self, config: Optional[HistogramConfig] = None) -> None:
        self.config = config or HistogramConfig()
        if self.config.bins < 2:
            raise ValueError("bins must be >= 2")
        if self.config.canvas_width < self.config.bins:
            raise ValueError("canvas_width must be >= bins")

    @property
    def bin_width(self) -> int:
        return self.config.canvas_width // self.config.bins

    def compute(self, gray: np.ndarray) -> np.ndarray:
        """Bucket counts min-max scaled to [0, canvas_height], float32, shape (bins,)."""
        c = self.config
        hist = cv2.calcHist([gray], [0], None, [c.bins], [0, 256])
        hist = cv2.normalize(hist, None, 0, c.canvas_height, cv2.NORM_MINMAX)
        return hist.ravel()

    def render(self, hist: np.ndarray) -> np.ndarray:
        c = self.config
        h = c.canvas_height
        canvas = np.zeros((h, c.canvas_width, 3), dtype=np.uint8)
        bw = self.bin_width
        for i in range(1, len(hist)):
            p0 = (bw * (i - 1), h - int(round(float(hist[i - 1]))))
            p1 = (bw * i, h - int(round(float(hist[i]))))
            cv2.line(canvas, p0, p1, c.color, c.line_thickness, cv2.LINE_8)
        return canvas

    def plot(self, gray: np.ndarray) -> np.ndarray:
        return self.render(self.compute(gray))
