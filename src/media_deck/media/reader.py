"""
Module: media.reader

Purpose:
    Byte access for media files. A failed read is reported as
    "no bytes available" rather than an exception so callers can
    fall back to default dimensions.

Key Classes:
    - ByteReader: Abstract byte source
    - FileByteReader: Reads local files

Dependencies:
    - pathlib (std)

Used By:
    - media.dimensions: Header parsing
    - output: Document encoders
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class ByteReader(ABC):
    """Abstract interface for reading media bytes."""

    @abstractmethod
    def read(self, path: Union[str, Path]) -> Optional[bytes]:
        """
        Read all bytes for a media path.

        Args:
            path: Media location

        Returns:
            File contents, or None if they could not be read
        """


class FileByteReader(ByteReader):
    """Reads media bytes from the local filesystem."""

    def read(self, path: Union[str, Path]) -> Optional[bytes]:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            return None
