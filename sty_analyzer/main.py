# main.py
import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from sty_analyzer.bitmaps import build_bitmaps
from sty_analyzer.errors import StyleParsingError
from sty_analyzer.export import export_bitmaps, export_metadata
from sty_analyzer.parser import load_style
from sty_analyzer.utils.logging import setup_logging

logger = logging.getLogger(__name__)

def process_style_file(style_path: Path,
                       output_dir: Path,
                       tiles: bool = True,
                       sprites: bool = True,
                       deltas: bool = True,
                       metadata: bool = False) -> int:
    """Decode one style file and export its assets.

    Returns:
        Number of images written
    """
    style = load_style(style_path)
    logger.info(
        f"{style_path.name}: version {style.version}, {style.palette_count} palettes, "
        f"{style.tile_count} tiles, {len(style.sprites)} sprites, "
        f"{len(style.delta_sets)} delta sets"
    )

    if metadata:
        export_metadata(style, output_dir / f"{style_path.stem}_metadata.json")

    if not (tiles or sprites or deltas):
        return 0

    bitmaps = build_bitmaps(style)
    return export_bitmaps(bitmaps, style, output_dir, tiles=tiles, sprites=sprites, deltas=deltas)

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Decode a GTA2 style (.sty) file and export its graphics'
    )
    parser.add_argument('style_file',
                        help='Path to the .sty file')
    parser.add_argument('--output',
                        default='output',
                        help='Output directory for images and metadata')
    parser.add_argument('--log-dir',
                        default=None,
                        help='Directory for log files (console only if omitted)')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')
    parser.add_argument('--no-tiles',
                        action='store_true',
                        help='Do not export tiles')
    parser.add_argument('--no-sprites',
                        action='store_true',
                        help='Do not export sprites')
    parser.add_argument('--no-deltas',
                        action='store_true',
                        help='Do not export delta frames')
    parser.add_argument('--metadata',
                        action='store_true',
                        help='Also write a JSON file with the non-graphic records')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    style_path = Path(args.style_file)
    output_dir = Path(args.output)

    if not style_path.is_file():
        logger.error(f"Style file not found: {style_path}")
        return 1

    try:
        process_style_file(
            style_path,
            output_dir,
            tiles=not args.no_tiles,
            sprites=not args.no_sprites,
            deltas=not args.no_deltas,
            metadata=args.metadata
        )
    except (OSError, StyleParsingError) as e:
        logger.error(f"Processing failed: {e}")
        return 1

    logger.info("Processing complete")
    return 0

if __name__ == "__main__":
    sys.exit(main())
