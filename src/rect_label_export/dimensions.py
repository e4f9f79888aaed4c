"""
Image dimension lookup.

Keeps the pixel size of every loaded project image, keyed by image id.
"""

import logging
from pathlib import Path
from typing import Dict, Hashable, Tuple, Union

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    In-memory registry of image sizes.

    Usage:
        repo = ImageRepository()
        repo.store('img1', 640, 480)
        repo.load_from_file('img2', '/data/img2.jpg')
        width, height = repo.get_by_id('img1')
    """

    def __init__(self):
        self._sizes: Dict[Hashable, Tuple[int, int]] = {}

    def store(self, image_id: Hashable, width: int, height: int) -> None:
        """Register the size of an image."""
        self._sizes[image_id] = (int(width), int(height))

    def load_from_file(self, image_id: Hashable, image_path: Union[str, Path]) -> Tuple[int, int]:
        """
        Read an image from disk and register its size.

        Args:
            image_id: Identifier the image is looked up by
            image_path: Path to the image file

        Returns:
            (width, height) in pixels

        Raises:
            ValueError: If the file cannot be decoded as an image
        """
        # imdecode over fromfile copes with non-ASCII paths, unlike imread
        buffer = np.fromfile(str(image_path), dtype=np.uint8)
        img = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED) if buffer.size else None
        if img is None:
            raise ValueError(f"Could not read image: {image_path}")

        height, width = img.shape[:2]
        self.store(image_id, width, height)
        logger.debug(f"Loaded {image_path}: {width}x{height}")
        return width, height

    def get_by_id(self, image_id: Hashable) -> Tuple[int, int]:
        """
        Get (width, height) of a registered image.

        Raises:
            KeyError: If the image was never registered
        """
        return self._sizes[image_id]

    def __contains__(self, image_id: Hashable) -> bool:
        return image_id in self._sizes

    def __len__(self) -> int:
        return len(self._sizes)
