"""
Export Manager - Dispatches a project export to the requested label format.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Hashable, List, Optional, Tuple, Type, Union

from .base_exporter import ArchiveBuilder, BaseExporter, ExportContext
from .csv_exporter import CSVExporter
from .pascal_voc_exporter import PascalVOCExporter
from .yolo_exporter import YOLOExporter
from ..config import ExportSettings
from ..models import ExportFormat, ExportResult, ProjectSnapshot
from ..naming import export_timestamp, project_slug

logger = logging.getLogger(__name__)

DownloadTrigger = Callable[[bytes, str, str], object]


class ExportManager:
    """
    Entry point for rectangle label exports.

    Usage:
        manager = ExportManager(repo.get_by_id, download=DirectoryDownloader("/out"))
        result = manager.export(ExportFormat.YOLO, snapshot)
    """

    AVAILABLE_FORMATS: Dict[ExportFormat, Type[BaseExporter]] = {
        ExportFormat.YOLO: YOLOExporter,
        ExportFormat.VOC: PascalVOCExporter,
        ExportFormat.CSV: CSVExporter
    }

    def __init__(self,
                 get_dimensions: Callable[[Hashable], Tuple[int, int]],
                 download: Optional[DownloadTrigger] = None,
                 settings: Optional[ExportSettings] = None,
                 archive_builder: Optional[ArchiveBuilder] = None):
        """
        Initialize export manager.

        Args:
            get_dimensions: Image id -> (width, height) lookup
            download: Receives (data, file_name, mime_type) of every finished export
            settings: Export settings (defaults if None)
            archive_builder: Packs per-image files into one blob (zip if None)
        """
        self.get_dimensions = get_dimensions
        self.download = download
        self.settings = settings or ExportSettings()
        self.archive_builder = archive_builder

    def export(self,
               export_format: Union[ExportFormat, str],
               snapshot: ProjectSnapshot,
               moment: Optional[datetime] = None) -> Optional[ExportResult]:
        """
        Export the project and hand the result to the download trigger.

        Unknown formats are ignored: nothing is built or downloaded.

        Args:
            export_format: Format to export to
            snapshot: Project state to read
            moment: Export time used in the file name (now if None)

        Returns:
            ExportResult, or None for an unsupported format
        """
        fmt = ExportFormat.parse(export_format)
        if fmt is None:
            logger.debug(f"Ignoring unsupported export format: {export_format!r}")
            return None

        context = ExportContext(
            snapshot=snapshot,
            get_dimensions=self.get_dimensions,
            slug=project_slug(snapshot.project_name),
            timestamp=export_timestamp(moment, self.settings.use_24_hour_clock),
            unknown_label_name=self.settings.unknown_label_name
        )

        exporter = self.AVAILABLE_FORMATS[fmt](
            archive_builder=self.archive_builder,
            show_progress=self.settings.show_progress
        )

        logger.info(f"Exporting {snapshot.project_name!r} to {fmt.value} format...")
        result = exporter.export(context)

        if self.download is not None:
            self.download(result.data, result.file_name, result.mime_type)

        return result

    @classmethod
    def get_available_formats(cls) -> List[str]:
        """
        Get list of available export formats.

        Returns:
            List of format names
        """
        return [fmt.value for fmt in cls.AVAILABLE_FORMATS]

    @classmethod
    def get_format_description(cls, format_name: str) -> str:
        """
        Get description of a format.

        Args:
            format_name: Name of format

        Returns:
            Description string
        """
        descriptions = {
            ExportFormat.YOLO: 'YOLO format (.txt per image, normalized coordinates, zipped)',
            ExportFormat.VOC: 'Pascal VOC XML format (per image annotations, zipped)',
            ExportFormat.CSV: 'Single CSV file (name,x,y,w,h,file,width,height)'
        }
        fmt = ExportFormat.parse(format_name)
        return descriptions.get(fmt, f"Unknown format: {format_name}")
