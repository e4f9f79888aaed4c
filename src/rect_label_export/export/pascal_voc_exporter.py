"""
Pascal VOC format exporter.

Exports annotations as one tab-indented XML document per image.
"""

from typing import List, Optional

from .base_exporter import BaseExporter, ExportContext
from ..models import ImageRecord, LabelBox
from ..naming import round_half_up


class PascalVOCExporter(BaseExporter):
    """
    Exports annotations in Pascal VOC XML format.

    Archive contents:
        labels_<slug>_<timestamp>.zip
        ├── img001.xml
        └── ...

    The document is assembled line by line rather than through ElementTree so
    the layout (tabs, no XML declaration, unescaped text) stays fixed.
    """

    file_extension = 'xml'

    def get_format_name(self) -> str:
        return "VOC"

    def wrap_image(self, image: ImageRecord, context: ExportContext) -> Optional[str]:
        """
        Create the VOC XML annotation for an image.

        Args:
            image: Image record with its boxes
            context: Export context

        Returns:
            XML string, or None if the image has no boxes or is not loaded
        """
        if not image.has_output:
            return None

        img_w, img_h = context.get_dimensions(image.id)
        slug = context.slug

        lines = [
            "<annotation>",
            f"\t<folder>{slug}</folder>",
            f"\t<filename>{image.file_name}</filename>",
            f"\t<path>/{slug}/{image.file_name}</path>",
            "\t<source>",
            "\t\t<database>Unspecified</database>",
            "\t</source>",
            "\t<size>",
            f"\t\t<width>{img_w}</width>",
            f"\t\t<height>{img_h}</height>",
            "\t\t<depth>3</depth>",
            "\t</size>",
        ]
        for box in image.boxes:
            lines.extend(self._object_lines(box, context))
        lines.append("</annotation>")

        return "\n".join(lines)

    def _object_lines(self, box: LabelBox, context: ExportContext) -> List[str]:
        """
        Build the <object> block for one box.

        Each corner is rounded on its own, so xmax - xmin may differ from
        the rounded width.
        """
        rect = box.rect
        return [
            "\t<object>",
            f"\t\t<name>{context.label_name(box.label_index)}</name>",
            "\t\t<pose>Unspecified</pose>",
            "\t\t<truncated>Unspecified</truncated>",
            "\t\t<difficult>Unspecified</difficult>",
            "\t\t<bndbox>",
            f"\t\t\t<xmin>{round_half_up(rect.x)}</xmin>",
            f"\t\t\t<ymin>{round_half_up(rect.y)}</ymin>",
            f"\t\t\t<xmax>{round_half_up(rect.x + rect.width)}</xmax>",
            f"\t\t\t<ymax>{round_half_up(rect.y + rect.height)}</ymax>",
            "\t\t</bndbox>",
            "\t</object>",
        ]
