from .config import LoadConfig, FilterConfig, HistogramConfig, PipelineConfig
from .helpers import (
    ImageInputError, ImageNotFoundError, UnsupportedFormatError, ImageDecodeError,
    LoadedImage, validate_image_path, load_image_bgr, resize_to_fit, load_and_prepare,
)
from .preprocess import ImageTransformer
from .histogram import HistogramPlotter
from .pipeline import DemoPipeline, Panel
from .viz import Visualizer

__all__ = [
    "LoadConfig", "FilterConfig", "HistogramConfig", "PipelineConfig",
    "ImageInputError", "ImageNotFoundError", "UnsupportedFormatError", "ImageDecodeError",
    "LoadedImage", "validate_image_path", "load_image_bgr", "resize_to_fit", "load_and_prepare",
    "ImageTransformer",
    "HistogramPlotter",
    "DemoPipeline", "Panel",
    "Visualizer",
]
