"""Command line entry point: build a media deck from files and folders."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .config import DeckConfig
from .controller import BuildError, build_deck
from .media import MediaFormats, MediaItem, item_for_path

logger = logging.getLogger("media_deck")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="media-deck",
        description="Lay out images and videos as a paginated PDF or PPTX deck",
    )
    parser.add_argument("output", type=Path,
                        help="Output document (.pdf or .pptx)")
    parser.add_argument("files", nargs="*", type=Path,
                        help="Media files, placed before directory contents")
    parser.add_argument("--media-dir", "-d", action="append", type=Path, default=[],
                        dest="media_dirs", help="Directory to scan (repeatable)")
    parser.add_argument("--workers", "-w", type=int, default=4,
                        help="Threads used to read image headers")
    parser.add_argument("--no-metadata", action="store_true",
                        help="Do not write the JSON sidecar")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-item placement detail")
    return parser.parse_args(argv)


def _items_from_files(paths: Sequence[Path], formats: MediaFormats) -> List[MediaItem]:
    items = []
    for path in paths:
        item = item_for_path(path, formats)
        if item is None:
            logger.warning(f"Skipping unsupported file: {path}")
            continue
        items.append(item)
    return items


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    formats = MediaFormats()
    try:
        config = DeckConfig(
            output_path=args.output,
            media_dirs=tuple(args.media_dirs),
            items=tuple(_items_from_files(args.files, formats)),
            formats=formats,
            max_workers=args.workers,
            write_metadata=not args.no_metadata,
        )
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    try:
        result = build_deck(config)
    except BuildError as e:
        logger.error(f"Error in presentation generation: {e}")
        return 1

    logger.info(
        f"Generation result: {result.item_count} media files, "
        f"{result.page_count} pages, output {result.output_path}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
