"""
Shared fixtures for all tests.

This module provides common fixtures used across the unit tests.
"""
import pytest
import sys
from datetime import datetime
from pathlib import Path

import cv2
import numpy as np

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rect_label_export.dimensions import ImageRepository
from rect_label_export.models import ImageRecord, LabelBox, ProjectSnapshot, Rect


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


# =============================================================================
# Project Fixtures
# =============================================================================

@pytest.fixture
def export_moment():
    """Fixed export time, 14:07:09 so the 12-hour hour field differs from 24-hour."""
    return datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def cat_snapshot():
    """One 100x200 image with a single 'cat' box."""
    return ProjectSnapshot(
        project_name="My Project",
        images=[
            ImageRecord(
                id="img1",
                file_name="img1.jpg",
                loaded=True,
                boxes=[LabelBox(label_index=0, rect=Rect(10, 20, 30, 40))]
            )
        ],
        label_names=["cat"]
    )


@pytest.fixture
def cat_repository():
    """Dimension lookup for cat_snapshot."""
    repo = ImageRepository()
    repo.store("img1", 100, 200)
    return repo


@pytest.fixture
def mixed_snapshot():
    """Project with labelled, empty and unloaded images."""
    return ProjectSnapshot(
        project_name="Street Scenes",
        images=[
            ImageRecord(
                id="a",
                file_name="a.jpg",
                boxes=[
                    LabelBox(0, Rect(0, 0, 64, 48)),
                    LabelBox(1, Rect(100.5, 50.4, 20.2, 10.6)),
                ]
            ),
            ImageRecord(id="empty", file_name="empty.png", boxes=[]),
            ImageRecord(
                id="pending",
                file_name="pending.jpg",
                loaded=False,
                boxes=[LabelBox(0, Rect(1, 1, 5, 5))]
            ),
            ImageRecord(
                id="b",
                file_name="frames/b.frame.png",
                boxes=[LabelBox(1, Rect(320, 240, 160, 120))]
            ),
        ],
        label_names=["car", "person"]
    )


@pytest.fixture
def mixed_repository():
    """Dimension lookup for mixed_snapshot; 'pending' is deliberately absent."""
    repo = ImageRepository()
    repo.store("a", 640, 480)
    repo.store("empty", 640, 480)
    repo.store("b", 640, 480)
    return repo


# =============================================================================
# COCO Data Fixtures
# =============================================================================

@pytest.fixture
def small_coco_data():
    """Generate a small COCO dataset for quick tests."""
    return {
        "info": {"description": "Small Test Dataset"},
        "licenses": [],
        "categories": [
            {"id": 2, "name": "dog"},
            {"id": 1, "name": "cat"}
        ],
        "images": [
            {"id": 1, "file_name": "img1.jpg", "width": 640, "height": 480},
            {"id": 2, "file_name": "img2.jpg", "width": 640, "height": 480},
            {"id": 3, "file_name": "img3.jpg"}
        ],
        "annotations": [
            {"id": 1, "image_id": 1, "category_id": 1, "bbox": [10, 10, 100, 100], "area": 10000, "iscrowd": 0},
            {"id": 2, "image_id": 1, "category_id": 2, "bbox": [150, 10, 80, 80], "area": 6400, "iscrowd": 0},
            {"id": 3, "image_id": 3, "category_id": 2, "bbox": [30, 30, 110, 110], "area": 12100, "iscrowd": 0},
            {"id": 4, "image_id": 2, "category_id": 99, "bbox": [20, 20, 90, 90], "area": 8100, "iscrowd": 0}
        ]
    }


# =============================================================================
# File System Fixtures
# =============================================================================

@pytest.fixture
def sample_image_file(tmp_path):
    """Write a 64x32 (width x height) JPEG to disk."""
    np.random.seed(42)
    img_array = np.random.randint(0, 255, (32, 64, 3), dtype=np.uint8)
    path = tmp_path / "sample.jpg"
    cv2.imwrite(str(path), img_array)
    return path


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a temporary output directory."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir
