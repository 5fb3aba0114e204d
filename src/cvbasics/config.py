from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

import cv2


# Config dataclasses (lightweight & reusable)

SUPPORTED_FORMATS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".bmp", ".tiff")


@dataclass
class LoadConfig:
    max_width: int = 1920       # Full HD width
    max_height: int = 1080      # Full HD height
    supported_formats: Tuple[str, ...] = SUPPORTED_FORMATS


@dataclass
class FilterConfig:
    canny_low: float = 100.0
    canny_high: float = 200.0
    gaussian_ksize: int = 15    # odd, >= 1
    gaussian_sigma: float = 0.0  # 0 => derived from ksize by OpenCV
    box_ksize: int = 5          # >= 1
    laplacian_ddepth: int = cv2.CV_64F


@dataclass
class HistogramConfig:
    bins: int = 256
    canvas_width: int = 512
    canvas_height: int = 400
    line_thickness: int = 2
    color: Tuple[int, int, int] = (255, 255, 255)


@dataclass
class PipelineConfig:
    load: LoadConfig = field(default_factory=LoadConfig)
    filters: FilterConfig = field(default_factory=FilterConfig)
    histogram: HistogramConfig = field(default_factory=HistogramConfig)
    backend: str = "opencv"     # 'opencv' | 'matplotlib' | 'none'
    wait: bool = True           # block for a key press after the last panel
