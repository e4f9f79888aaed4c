"""
Export module for writing rectangle labels in training formats.

Supported formats:
- YOLO: Per-image .txt files with normalized coordinates, zipped
- VOC: Pascal VOC XML per image, zipped
- CSV: One header-less CSV for the whole project
"""

from .base_exporter import BaseExporter, ExportContext
from .yolo_exporter import YOLOExporter
from .pascal_voc_exporter import PascalVOCExporter
from .csv_exporter import CSVExporter
from .export_manager import ExportManager

__all__ = [
    'BaseExporter',
    'ExportContext',
    'YOLOExporter',
    'PascalVOCExporter',
    'CSVExporter',
    'ExportManager'
]
