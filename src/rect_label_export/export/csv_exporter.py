"""
CSV exporter - all boxes of the project in one header-less file.
"""

import logging
from typing import Optional

from .base_exporter import BaseExporter, ExportContext
from ..models import ExportResult, ImageRecord, LabelBox
from ..naming import archive_name, round_half_up

logger = logging.getLogger(__name__)

CSV_MIME_TYPE = 'text/plain;charset=utf-8'


class CSVExporter(BaseExporter):
    """
    Exporter for flat CSV.

    Row format (no header, no quoting):
        name,x,y,width,height,file_name,image_width,image_height
    """

    file_extension = 'csv'

    def get_format_name(self) -> str:
        return "CSV"

    def wrap_image(self, image: ImageRecord, context: ExportContext) -> Optional[str]:
        if not image.has_output:
            return None

        img_w, img_h = context.get_dimensions(image.id)
        return "\n".join(self._box_to_row(box, image, img_w, img_h, context) for box in image.boxes)

    def _box_to_row(self, box: LabelBox, image: ImageRecord,
                    img_w: int, img_h: int, context: ExportContext) -> str:
        rect = box.rect
        fields = [
            context.label_name(box.label_index),
            str(round_half_up(rect.x)),
            str(round_half_up(rect.y)),
            str(round_half_up(rect.width)),
            str(round_half_up(rect.height)),
            image.file_name,
            str(img_w),
            str(img_h),
        ]
        return ",".join(fields)

    def export(self, context: ExportContext) -> ExportResult:
        """
        Join the rows of every image into a single CSV file.

        Args:
            context: Export context

        Returns:
            ExportResult holding the UTF-8 encoded CSV
        """
        wrapped, skipped = self.collect(context)
        content = "\n".join(block for _, block in wrapped)

        result = ExportResult(
            format_name=self.get_format_name(),
            file_name=archive_name(context.slug, context.timestamp, self.file_extension),
            data=content.encode('utf-8'),
            mime_type=CSV_MIME_TYPE,
            num_images=len(wrapped),
            num_annotations=sum(len(image.boxes) for image, _ in wrapped),
            skipped_images=skipped
        )
        logger.info(f"CSV export complete: {result.num_images} images, "
                    f"{result.num_annotations} annotations")
        return result
