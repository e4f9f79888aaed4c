"""
YOLO format exporter - one normalized .txt label file per image.
"""

from typing import Optional

from .base_exporter import BaseExporter, ExportContext
from ..models import ImageRecord, LabelBox


class YOLOExporter(BaseExporter):
    """
    Exporter for YOLO format.

    Archive contents:
        labels_<slug>_<timestamp>.zip
        ├── img001.txt
        └── ...
    """

    file_extension = 'txt'

    def get_format_name(self) -> str:
        """Return format name."""
        return "YOLO"

    def wrap_image(self, image: ImageRecord, context: ExportContext) -> Optional[str]:
        """
        YOLO format per line: class_id x_center y_center width height

        Coordinates are divided by the image size and written with 6 decimals.
        """
        if not image.has_output:
            return None

        img_w, img_h = context.get_dimensions(image.id)
        return "\n".join(self._box_to_yolo(box, img_w, img_h) for box in image.boxes)

    def _box_to_yolo(self, box: LabelBox, img_w: int, img_h: int) -> str:
        """
        Convert one box to a YOLO line.

        Args:
            box: Label box in pixels
            img_w: Image width
            img_h: Image height

        Returns:
            "class_id x_center y_center width height"
        """
        x, y, w, h = box.rect.x, box.rect.y, box.rect.width, box.rect.height

        x_center = (x + w / 2) / img_w
        y_center = (y + h / 2) / img_h
        w_norm = w / img_w
        h_norm = h / img_h

        return f"{box.label_index} {x_center:.6f} {y_center:.6f} {w_norm:.6f} {h_norm:.6f}"
