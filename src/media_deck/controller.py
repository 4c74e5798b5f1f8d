"""
Module: controller

Purpose:
    Orchestrate the complete deck building pipeline.
    Collect → Paginate → Encode → Metadata

Key Functions:
    - build_deck(): Main entry point for building a deck

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - media: Item collection and byte access
    - layout: Pagination
    - output: Document encoders

Used By:
    - __main__: Command line
"""

from __future__ import annotations

import json
import logging
import tempfile
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DeckConfig
from .layout import DeckLayout, paginate
from .media import (
    ByteReader,
    DirectoryMediaSource,
    FileByteReader,
    MediaItem,
    MediaSource,
    MediaSourceError,
    StaticMediaSource,
    collect_items,
)
from .output import encoder_for_path, publish_file, write_atomic

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_path: Path to the generated document
        metadata_path: Path to the JSON sidecar (if written)
        layout: Page layout that was encoded
        item_count: Number of media items placed
        page_count: Number of pages generated
        warnings: Any warnings during build
        elapsed_seconds: Wall time of the build

    Example:
        >>> result = build_deck(config)
        >>> print(f"Generated {result.page_count} pages with {result.item_count} items")
    """
    output_path: Path
    metadata_path: Optional[Path]
    layout: DeckLayout
    item_count: int
    page_count: int
    warnings: tuple[str, ...]
    elapsed_seconds: float


def build_deck(
    config: DeckConfig,
    *,
    reader: Optional[ByteReader] = None,
) -> BuildResult:
    """
    Build a deck from start to finish.

    Pipeline:
    1. Collect media items (explicit items, then each media directory)
    2. Resolve dimensions and paginate
    3. Encode to a temp file and publish atomically
    4. (Optional) Write JSON metadata

    Args:
        config: Build configuration
        reader: Byte source (defaults to FileByteReader)

    Returns:
        BuildResult with paths and layout

    Raises:
        BuildError: If items cannot be collected or the document
            cannot be written. No partial output is published.

    Example:
        >>> result = build_deck(DeckConfig(
        ...     output_path=Path("output/media.pptx"),
        ...     media_dirs=(Path("media_files"),),
        ... ))
    """
    start_time = time.perf_counter()
    reader = reader if reader is not None else FileByteReader()

    logger.info("Starting media presentation generation...")

    # 1. Collect items
    sources: List[MediaSource] = []
    if config.items:
        sources.append(StaticMediaSource(config.items))
    sources.extend(DirectoryMediaSource(d, config.formats) for d in config.media_dirs)

    try:
        items = collect_items(sources)
    except MediaSourceError as e:
        raise BuildError(f"Failed to collect media: {e}") from e

    logger.info(f"Creating pages for {len(items)} media files...")

    # 2. Paginate
    layout = paginate(
        items,
        config.canvas,
        reader=reader,
        formats=config.formats,
        max_workers=config.max_workers,
    )
    for warning in layout.warnings:
        logger.debug(warning)

    # 3. Encode
    encoder = encoder_for_path(config.output_path)
    try:
        write_atomic(encoder, layout, config.canvas, config.output_path, reader)
    except Exception as e:
        raise BuildError(f"Failed to write {config.output_path}: {e}") from e
    logger.info(f"Presentation saved as: {config.output_path}")

    elapsed = time.perf_counter() - start_time

    # 4. Metadata
    metadata_path = None
    if config.write_metadata:
        metadata_path = config.metadata_path
        metadata = _build_metadata(config, items, layout, elapsed)
        try:
            _write_metadata(metadata_path, metadata)
        except OSError as e:
            raise BuildError(f"Failed to write metadata {metadata_path}: {e}") from e
        logger.info(f"Wrote build metadata to {metadata_path}")

    logger.info(f"Media presentation generation completed in {elapsed:.2f}s")

    return BuildResult(
        output_path=config.output_path,
        metadata_path=metadata_path,
        layout=layout,
        item_count=len(items),
        page_count=layout.page_count,
        warnings=tuple(layout.warnings),
        elapsed_seconds=elapsed,
    )


def _build_metadata(
    config: DeckConfig,
    items: List[MediaItem],
    layout: DeckLayout,
    elapsed: float,
) -> Dict[str, Any]:
    """Build JSON-serializable description of the build."""
    from media_deck import __version__

    pages = []
    for page in layout.pages:
        pages.append({
            "index": page.index,
            "title": page.title,
            "message": page.message,
            "entries": [
                {
                    "path": str(entry.item.path),
                    "kind": entry.item.kind.value,
                    "intrinsic_size": [entry.intrinsic_width, entry.intrinsic_height],
                    "box": {
                        "x": round(entry.box.x, 4),
                        "y": round(entry.box.y, 4),
                        "width": round(entry.box.width, 4),
                        "height": round(entry.box.height, 4),
                        "aspect_ratio": round(entry.box.aspect_ratio, 4),
                    },
                }
                for entry in page.entries
            ],
        })

    return {
        "generator_version": __version__,
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "output_file": config.output_path.name,
        "canvas": {
            "width": config.canvas.width,
            "height": config.canvas.height,
            "title_height": config.canvas.title_height,
            "margin": config.canvas.margin,
            "spacing": config.canvas.spacing,
            "max_items_per_page": config.canvas.max_items_per_page,
        },
        "total_media_files": len(items),
        "total_pages": layout.page_count,
        "elapsed_seconds": round(elapsed, 3),
        "pages": pages,
        "warnings": list(layout.warnings),
    }


def _write_metadata(path: Path, data: Dict[str, Any]) -> None:
    """Write JSON atomically using temp file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".json",
            dir=path.parent,
            delete=False,
            encoding="utf-8",
        ) as f:
            temp_path = Path(f.name)
            json.dump(data, f, indent=2, ensure_ascii=False)
        publish_file(temp_path, path)
    except BaseException:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise
