from __future__ import annotations
from typing import List, Optional, Tuple

import cv2
import logging
import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)

BACKENDS = ("opencv", "matplotlib", "none")


class Visualizer:
    """
    One titled window per panel, a single blocking wait, then teardown.
    Use as a context manager so windows are released on every exit path.
    'none' keeps panels in memory only (headless runs).
    """

    def __init__(self, backend: str = "opencv", figsize: Tuple[int, int] = (6, 6)) -> None:
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend: {backend}")
        self.backend = backend
        self.figsize = figsize
        self.shown: List[str] = []
        self.panels: List[Tuple[str, np.ndarray]] = []

    def __enter__(self) -> "Visualizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def to_display_rgb(img: np.ndarray) -> np.ndarray:
        if img.ndim == 3 and img.shape[2] == 3:
            return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        return img

    def _show_matplotlib(self, title: str, img: np.ndarray) -> plt.Figure:
        fig, ax = plt.subplots(figsize=self.figsize)
        fig.canvas.manager.set_window_title(title)
        cmap: Optional[str] = "gray" if img.ndim == 2 else None
        ax.imshow(self.to_display_rgb(img), cmap=cmap)
        ax.set_title(title)
        ax.axis("off")
        fig.tight_layout()
        plt.show(block=False)
        return fig

    def show(self, title: str, img: np.ndarray) -> None:
        logger.debug("showing %r: shape=%s dtype=%s", title, img.shape, img.dtype)
        # recorded first so close() tears down a window whose imshow failed
        self.shown.append(title)
        if self.backend == "opencv":
            cv2.imshow(title, img)
        elif self.backend == "matplotlib":
            self._show_matplotlib(title, img)
        else:
            self.panels.append((title, img))

    def wait(self) -> None:
        """Block until the user presses a key (or closes the figures)."""
        if not self.shown:
            return
        if self.backend == "opencv":
            cv2.waitKey(0)
        elif self.backend == "matplotlib":
            plt.show()

    def close(self) -> None:
        if self.backend == "opencv" and self.shown:
            cv2.destroyAllWindows()
        elif self.backend == "matplotlib":
            plt.close("all")
