from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

import logging
import numpy as np

from .config import PipelineConfig
from .histogram import HistogramPlotter
from .preprocess import ImageTransformer

logger = logging.getLogger(__name__)

CHANNEL_SKIP_MESSAGE = "The image does not have 3 channels (BGR). Skipping channel display."


@dataclass
class Panel:
    title: str
    image: np.ndarray


class DemoPipeline:
    """
    Fixed tour of classic operations over one image:
      original -> gray -> R/G/B -> equalized -> histogram
      -> Canny -> Gaussian blur -> box blur -> Laplacian
    Panels are yielded as soon as they exist, so a failing step
    stops everything after it.
    """

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        self.config = config or PipelineConfig()
        self.transformer = ImageTransformer(self.config.filters)
        self.histogram = HistogramPlotter(self.config.histogram)

    def iter_panels(self, img_bgr: np.ndarray) -> Iterator[Panel]:
        t = self.transformer
        yield Panel("Original Image", img_bgr)

        gray = t.to_gray(img_bgr)
        yield Panel("Grayscale Image", gray)

        channels = t.split_channels(img_bgr)
        if channels is None:
            logger.warning(CHANNEL_SKIP_MESSAGE)
        else:
            yield Panel("Red Channel", channels["red"])
            yield Panel("Green Channel", channels["green"])
            yield Panel("Blue Channel", channels["blue"])

        yield Panel("Equalized Grayscale Image", t.equalize(gray))
        yield Panel("Gray Image Histogram", self.histogram.plot(gray))

        yield Panel("Canny Edge Detection", t.detect_edges(gray))
        yield Panel("Gaussian Blur", t.gaussian_blur(img_bgr))
        yield Panel("Smoothing", t.box_blur(img_bgr))
        yield Panel("Laplacian Filter", t.laplacian(gray))

    def run(self, img_bgr: np.ndarray) -> List[Panel]:
        return list(self.iter_panels(img_bgr))
