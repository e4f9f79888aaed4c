"""
Data models for rectangle label export.

Read-only snapshot of the annotation project handed to every export call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, List, Optional, Union


class ExportFormat(str, Enum):
    """Label formats supported by the export dispatcher."""
    YOLO = 'yolo'
    VOC = 'voc'
    CSV = 'csv'

    @classmethod
    def parse(cls, value: Union['ExportFormat', str, None]) -> Optional['ExportFormat']:
        """
        Resolve a format enum or name, returning None for anything unknown.

        Args:
            value: ExportFormat member or case-insensitive name ('pascal_voc' maps to VOC)

        Returns:
            Matching ExportFormat, or None
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        name = value.strip().lower()
        if name == 'pascal_voc':
            name = 'voc'
        for fmt in cls:
            if fmt.value == name:
                return fmt
        return None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixels, (x, y) is the top-left corner."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LabelBox:
    """One annotated rectangle and the index of its class name."""
    label_index: int
    rect: Rect


@dataclass(frozen=True)
class ImageRecord:
    """An image in the project together with its boxes."""
    id: Hashable
    file_name: str
    loaded: bool = True
    boxes: List[LabelBox] = field(default_factory=list)

    @property
    def has_output(self) -> bool:
        """Images without boxes, or not yet loaded, are never exported."""
        return self.loaded and len(self.boxes) > 0


@dataclass(frozen=True)
class ProjectSnapshot:
    """Project state captured at export time."""
    project_name: str
    images: List[ImageRecord] = field(default_factory=list)
    label_names: List[str] = field(default_factory=list)

    def label_name(self, index: int, fallback: str = '') -> str:
        """Name for a label index; out-of-range indices get the fallback."""
        if 0 <= index < len(self.label_names):
            return self.label_names[index]
        return fallback


@dataclass
class ExportResult:
    """Result of an export operation."""
    format_name: str
    file_name: str
    data: bytes
    mime_type: str
    num_images: int
    num_annotations: int
    skipped_images: int = 0

    def __str__(self) -> str:
        return (f"ExportResult({self.format_name}) -> {self.file_name}\n"
                f"  Images: {self.num_images}, Annotations: {self.num_annotations}\n"
                f"  Skipped: {self.skipped_images}, Size: {len(self.data)} bytes")
