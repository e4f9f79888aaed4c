"""
Export settings.
"""

import os
from dataclasses import dataclass

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class ExportSettings:
    """Configuration for label export."""
    output_dir: str = './exports'
    use_24_hour_clock: bool = False  # False keeps the 12-hour hh field in file names
    unknown_label_name: str = ''  # Name written for out-of-range label indices
    show_progress: bool = False

    @classmethod
    def from_env(cls) -> 'ExportSettings':
        """
        Build settings from environment variables.

        RECT_LABEL_EXPORT_DIR, RECT_LABEL_EXPORT_24H,
        RECT_LABEL_EXPORT_UNKNOWN_LABEL, RECT_LABEL_EXPORT_PROGRESS
        """
        defaults = cls()
        return cls(
            output_dir=os.environ.get('RECT_LABEL_EXPORT_DIR', defaults.output_dir),
            use_24_hour_clock=_env_flag('RECT_LABEL_EXPORT_24H', defaults.use_24_hour_clock),
            unknown_label_name=os.environ.get('RECT_LABEL_EXPORT_UNKNOWN_LABEL',
                                              defaults.unknown_label_name),
            show_progress=_env_flag('RECT_LABEL_EXPORT_PROGRESS', defaults.show_progress),
        )
