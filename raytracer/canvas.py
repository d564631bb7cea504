from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np
from PIL import Image

from raytracer.utils.vector_operations import BLACK

SCALE: int = 255
PPM_MAX_LINE_LENGTH: int = 70


def scale_colour(color_rgb: np.ndarray, scale: int = SCALE) -> np.ndarray:
    """Quantizes floating point channels to [0, scale]: negatives to 0, anything above 1
    to scale, and the rest rounded up."""
    color_array = np.asarray(color_rgb, dtype=float)
    scaled = np.ceil(np.clip(color_array, 0.0, 1.0) * scale)
    return scaled.astype(np.uint8 if scale <= 255 else np.int64)


class Canvas:
    """Framebuffer of unclamped colours, indexed (x, y) with y growing downwards."""

    def __init__(self, width: int, height: int, fill: np.ndarray = BLACK) -> None:
        self.width: int = int(width)
        self.height: int = int(height)
        self.pixels: np.ndarray = np.empty((self.height, self.width, 3), dtype=float)
        self.pixels[:, :] = np.asarray(fill, dtype=float)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, color_rgb: np.ndarray) -> None:
        # writes outside the canvas are dropped
        if self._contains(x, y):
            self.pixels[y, x, :] = color_rgb

    def pixel_at(self, x: int, y: int) -> np.ndarray | None:
        if not self._contains(x, y):
            return None
        return self.pixels[y, x, :].copy()

    def to_uint8(self) -> np.ndarray:
        return scale_colour(self.pixels, SCALE)

    def to_ppm(self) -> str:
        """Plain PPM (P3). Pixel triplets are never split and no line exceeds 70 characters."""
        quantized = self.to_uint8()
        lines: List[str] = []
        for row in quantized:
            line = ""
            for red, green, blue in row:
                entry = f"{red} {green} {blue}"
                if line and len(line) + 1 + len(entry) > PPM_MAX_LINE_LENGTH:
                    lines.append(line)
                    line = entry
                else:
                    line = f"{line} {entry}" if line else entry
            lines.append(line)
        header = f"P3\n{self.width} {self.height}\n{SCALE}\n"
        return header + "\n".join(lines) + "\n"

    def save(self, output_path: str | Path) -> None:
        """Writes PPM for a .ppm path, otherwise lets Pillow pick the format from the extension."""
        path = Path(output_path)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm(), encoding="ascii")
            return
        save_image(self.pixels, path)


def save_image(image_array: np.ndarray, output_path: str | Path) -> None:
    image = Image.fromarray(scale_colour(image_array, SCALE))
    image.save(output_path)
