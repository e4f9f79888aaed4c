"""
Build export snapshots from COCO-format datasets.
"""

import logging
from typing import Any, Dict, List, Tuple

from .dimensions import ImageRepository
from .models import ImageRecord, LabelBox, ProjectSnapshot, Rect

logger = logging.getLogger(__name__)


def validate_coco(coco_data: Dict[str, Any]) -> None:
    """
    Check that a dataset has the COCO structure the loader needs.

    Raises:
        ValueError: If a required key is missing or not a list
    """
    for key in ('images', 'annotations', 'categories'):
        if key not in coco_data:
            logger.error(f"Missing required key in COCO data: {key}")
            raise ValueError(f"Missing required key in COCO data: {key}")
        if not isinstance(coco_data[key], list):
            logger.error(f"'{key}' must be a list")
            raise ValueError(f"'{key}' must be a list")


def snapshot_from_coco(coco_data: Dict[str, Any],
                       project_name: str) -> Tuple[ProjectSnapshot, ImageRepository]:
    """
    Convert a COCO dataset into a project snapshot and its dimension lookup.

    Categories sorted by id become the label names; each annotation bbox
    [x, y, w, h] becomes a box on its image. Images without width/height are
    marked as not loaded.

    Args:
        coco_data: Dataset in COCO format
        project_name: Name used for the export file names

    Returns:
        (snapshot, repository)
    """
    validate_coco(coco_data)

    categories = sorted(coco_data['categories'], key=lambda x: x['id'])
    cat_id_to_idx = {cat['id']: idx for idx, cat in enumerate(categories)}
    label_names = [cat['name'] for cat in categories]

    boxes_by_image: Dict[Any, List[LabelBox]] = {}
    for ann in coco_data['annotations']:
        if ann.get('category_id') not in cat_id_to_idx:
            logger.warning(f"Unknown category_id {ann.get('category_id')} in annotation {ann.get('id')}")
            continue
        bbox = ann.get('bbox', [])
        if len(bbox) != 4:
            logger.warning(f"Annotation {ann.get('id')} has no valid bbox, skipping")
            continue

        x, y, w, h = bbox
        box = LabelBox(label_index=cat_id_to_idx[ann['category_id']], rect=Rect(x, y, w, h))
        boxes_by_image.setdefault(ann['image_id'], []).append(box)

    repository = ImageRepository()
    images = []
    for img in coco_data['images']:
        width, height = img.get('width'), img.get('height')
        loaded = bool(width) and bool(height)
        if loaded:
            repository.store(img['id'], width, height)

        images.append(ImageRecord(
            id=img['id'],
            file_name=img['file_name'],
            loaded=loaded,
            boxes=boxes_by_image.get(img['id'], [])
        ))

    logger.info(f"Loaded {len(images)} images, {len(label_names)} labels from COCO data")
    return ProjectSnapshot(project_name=project_name, images=images, label_names=label_names), repository
