"""
Base exporter class and the per-export context shared by all formats.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, List, Optional, Tuple
import logging

from tqdm import tqdm

from ..archive import build_zip_archive
from ..models import ExportResult, ImageRecord, ProjectSnapshot
from ..naming import archive_name, replace_extension

logger = logging.getLogger(__name__)

ArchiveBuilder = Callable[[Iterable[Tuple[str, str]]], bytes]

ZIP_MIME_TYPE = 'application/zip'


@dataclass(frozen=True)
class ExportContext:
    """Everything one export call reads; slug and timestamp are fixed for the whole call."""
    snapshot: ProjectSnapshot
    get_dimensions: Callable[[Hashable], Tuple[int, int]]
    slug: str
    timestamp: str
    unknown_label_name: str = ''

    def label_name(self, index: int) -> str:
        return self.snapshot.label_name(index, self.unknown_label_name)


class BaseExporter(ABC):
    """
    Abstract base class for rectangle label exporters.

    Subclasses turn one image into text; the base class runs that over the
    whole project and zips one file per image.
    """

    file_extension: str = 'txt'

    def __init__(self,
                 archive_builder: Optional[ArchiveBuilder] = None,
                 show_progress: bool = False):
        """
        Initialize the exporter.

        Args:
            archive_builder: Packs (file_name, content) pairs into a blob (zip by default)
            show_progress: Show a tqdm progress bar over the images
        """
        self.archive_builder = archive_builder or build_zip_archive
        self.show_progress = show_progress

    @abstractmethod
    def get_format_name(self) -> str:
        """
        Return the name of the export format.

        Returns:
            Format name string (e.g., 'YOLO', 'VOC', 'CSV')
        """
        pass

    @abstractmethod
    def wrap_image(self, image: ImageRecord, context: ExportContext) -> Optional[str]:
        """
        Serialize the labels of one image.

        Args:
            image: Image record with its boxes
            context: Export context

        Returns:
            Formatted text, or None if the image has no boxes or is not loaded
        """
        pass

    def collect(self, context: ExportContext) -> Tuple[List[Tuple[ImageRecord, str]], int]:
        """
        Serialize every image of the project in order.

        Args:
            context: Export context

        Returns:
            List of (image, content) for images with output, and the number of skipped images
        """
        wrapped = []
        skipped = 0
        images = tqdm(context.snapshot.images,
                      desc=f"Exporting {self.get_format_name()} labels",
                      disable=not self.show_progress)

        for image in images:
            content = self.wrap_image(image, context)
            if content is None:
                skipped += 1
                logger.debug(f"Skipping {image.file_name}: no boxes or not loaded")
                continue
            wrapped.append((image, content))

        return wrapped, skipped

    def export(self, context: ExportContext) -> ExportResult:
        """
        Export the project as a zip of per-image label files.

        Args:
            context: Export context

        Returns:
            ExportResult holding the archive bytes
        """
        wrapped, skipped = self.collect(context)

        files = [
            (replace_extension(image.file_name, self.file_extension), content)
            for image, content in wrapped
        ]
        data = self.archive_builder(files)

        result = ExportResult(
            format_name=self.get_format_name(),
            file_name=archive_name(context.slug, context.timestamp, 'zip'),
            data=data,
            mime_type=ZIP_MIME_TYPE,
            num_images=len(files),
            num_annotations=sum(len(image.boxes) for image, _ in wrapped),
            skipped_images=skipped
        )
        logger.info(f"{result.format_name} export complete: {result.num_images} images, "
                    f"{result.num_annotations} annotations")
        return result
