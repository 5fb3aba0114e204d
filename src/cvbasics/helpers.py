from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

import cv2
import logging
import numpy as np
import os

from .config import LoadConfig, SUPPORTED_FORMATS

logger = logging.getLogger(__name__)


# Errors

class ImageInputError(Exception):
    """Base class for failures that stop the pipeline before any display."""


class ImageNotFoundError(ImageInputError, FileNotFoundError):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__("File not found. Check the path.")
        self.path = str(path)


class UnsupportedFormatError(ImageInputError, ValueError):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__("Unsupported file format. Please use .jpg, .png, .bmp, or .tiff.")
        self.path = str(path)


class ImageDecodeError(ImageInputError, ValueError):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__("Failed to read the image. Check the file path or format.")
        self.path = str(path)


@dataclass
class LoadedImage:
    image: np.ndarray           # BGR uint8, possibly downscaled
    path: Path
    original_size: Tuple[int, int]  # (width, height) as decoded
    scale: float = 1.0

    @property
    def resized(self) -> bool:
        return self.scale != 1.0


# Input validation

def normalize_path(raw: str) -> str:
    """Strip whitespace and any quotes wrapping a pasted path."""
    return raw.strip().strip("\"'")


def validate_image_path(
    raw: str | os.PathLike,
    supported_formats: Iterable[str] = SUPPORTED_FORMATS,
) -> Path:
    """Return the path if it names an existing file with an allowed extension."""
    path = Path(normalize_path(os.fspath(raw)))
    if not path.is_file():
        raise ImageNotFoundError(path)
    if path.suffix.lower() not in tuple(supported_formats):
        raise UnsupportedFormatError(path)
    return path


# Decode & resize

def load_image_bgr(path: str | os.PathLike) -> np.ndarray:
    """Load an image as BGR uint8 (OpenCV default). Raises on failure."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise ImageDecodeError(path)
    return img


def resize_to_fit(img: np.ndarray, max_width: int, max_height: int) -> Tuple[np.ndarray, float]:
    """Uniformly downscale so width <= max_width and height <= max_height."""
    height, width = img.shape[:2]
    if width <= max_width and height <= max_height:
        return img, 1.0
    scale = min(max_width / width, max_height / height)
    # never let a thin side collapse to zero pixels
    dsize = (
        min(max_width, max(1, round(width * scale))),
        min(max_height, max(1, round(height * scale))),
    )
    resized = cv2.resize(img, dsize)
    return resized, scale


def load_and_prepare(raw_path: str | os.PathLike, config: Optional[LoadConfig] = None) -> LoadedImage:
    cfg = config or LoadConfig()
    path = validate_image_path(raw_path, cfg.supported_formats)
    img = load_image_bgr(path)
    height, width = img.shape[:2]
    logger.debug("decoded %s: %dx%d, %d channel(s)", path, width, height,
                 1 if img.ndim == 2 else img.shape[2])

    img, scale = resize_to_fit(img, cfg.max_width, cfg.max_height)
    return LoadedImage(image=img, path=path, original_size=(width, height), scale=scale)
