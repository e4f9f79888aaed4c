"""
Rectangle label export - YOLO, Pascal VOC and CSV writers for annotation projects.
"""

from .config import ExportSettings
from .dimensions import ImageRepository
from .models import ExportFormat, ExportResult, ImageRecord, LabelBox, ProjectSnapshot, Rect
from .export import ExportManager
from .loaders import snapshot_from_coco

__all__ = [
    'ExportSettings',
    'ImageRepository',
    'ExportFormat',
    'ExportResult',
    'ImageRecord',
    'LabelBox',
    'ProjectSnapshot',
    'Rect',
    'ExportManager',
    'snapshot_from_coco'
]
