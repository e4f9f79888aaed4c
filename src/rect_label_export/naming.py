"""
Naming and number formatting helpers shared by all export formats.
"""

import math
import re
from datetime import datetime
from typing import Optional

_EXTENSION_RE = re.compile(r'\.[^/.]+$')

TIMESTAMP_FORMAT_12H = '%Y%m%d%I%M%S'
TIMESTAMP_FORMAT_24H = '%Y%m%d%H%M%S'


def project_slug(project_name: str) -> str:
    """
    Derive the file-name slug for a project.

    Only the first space is replaced, so "My  Big Project" becomes
    "my--big project".

    Args:
        project_name: Display name of the project

    Returns:
        Lowercased name with its first space turned into a hyphen
    """
    return project_name.lower().replace(' ', '-', 1)


def export_timestamp(moment: Optional[datetime] = None, use_24_hour_clock: bool = False) -> str:
    """
    Format the export time as YYYYMMDDhhmmss.

    The hour field is on a 12-hour clock unless use_24_hour_clock is set.
    """
    if moment is None:
        moment = datetime.now()
    fmt = TIMESTAMP_FORMAT_24H if use_24_hour_clock else TIMESTAMP_FORMAT_12H
    return moment.strftime(fmt)


def replace_extension(file_name: str, extension: str) -> str:
    """
    Swap the trailing extension of a file name.

    Args:
        file_name: Original file name, e.g. 'img1.jpg'
        extension: New extension without the dot, e.g. 'txt'

    Returns:
        'img1.txt'; names without an extension come back unchanged
    """
    return _EXTENSION_RE.sub('.' + extension, file_name)


def archive_name(slug: str, timestamp: str, extension: str) -> str:
    """Download name: labels_<slug>_<timestamp>.<extension>"""
    return f"labels_{slug}_{timestamp}.{extension}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))
