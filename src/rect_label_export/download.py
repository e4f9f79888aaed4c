"""
Download triggers: hand a finished export to the user.

A trigger is any callable taking (data, file_name, mime_type).
"""

import logging
from pathlib import Path
from typing import Optional

import streamlit as st

from .config import ExportSettings

logger = logging.getLogger(__name__)


class DirectoryDownloader:
    """Saves each export into a local directory."""

    def __init__(self, output_dir: str):
        """
        Args:
            output_dir: Directory the files are written to (created if missing)
        """
        self.output_dir = Path(output_dir)
        self.last_path: Optional[Path] = None

    @classmethod
    def from_settings(cls, settings: ExportSettings) -> 'DirectoryDownloader':
        return cls(settings.output_dir)

    def __call__(self, data: bytes, file_name: str, mime_type: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / file_name
        path.write_bytes(data)
        self.last_path = path
        logger.info(f"Saved {file_name} ({mime_type}) to {self.output_dir}")
        return path


class StreamlitDownloader:
    """Offers each export through a Streamlit download button."""

    def __init__(self, label: str = "📥 Download labels", key: Optional[str] = None):
        self.label = label
        self.key = key

    def __call__(self, data: bytes, file_name: str, mime_type: str) -> bool:
        return st.download_button(
            self.label,
            data=data,
            file_name=file_name,
            mime=mime_type,
            key=self.key,
            use_container_width=True
        )
