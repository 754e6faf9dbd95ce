"""
Export of reconstructed bitmaps and metadata.
PNG files are written with Pillow, metadata as a JSON document.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from PIL import Image
from tqdm import tqdm

from .bitmaps import Bitmap, StyleBitmaps
from .models import StyleFile

logger = logging.getLogger(__name__)

def sprite_name(style: StyleFile, index: int) -> str:
    """Name a sprite after its sprite allocation category.

    Font sprites are further split per font when FONB is present, e.g.
    'font1_007'. Sprites outside the allocation table keep their absolute
    number.
    """
    if style.sprite_allocation is None or index >= style.sprite_allocation.total:
        return f"sprite_{index:04d}"
    category, relative = style.sprite_allocation.classify(index)

    fonts = style.font_allocation
    if category == 'font' and fonts is not None and relative < fonts.total:
        font, glyph = fonts.classify(relative)
        return f"{font}_{glyph:03d}"
    return f"{category}_{relative:04d}"

def save_bitmap(bitmap: Bitmap, path: Path) -> bool:
    """Write one bitmap as an RGBA PNG. Empty bitmaps are skipped."""
    if bitmap.width == 0 or bitmap.height == 0:
        logger.debug(f"Skipping empty bitmap {path.name}")
        return False
    Image.fromarray(bitmap.pixels).save(path, 'PNG')
    return True

def export_bitmaps(bitmaps: StyleBitmaps,
                   style: StyleFile,
                   output_dir: Union[str, Path],
                   tiles: bool = True,
                   sprites: bool = True,
                   deltas: bool = True) -> int:
    """Write tiles, sprites and delta frames as PNG files.

    Args:
        bitmaps: Output of build_bitmaps()
        style: Style the bitmaps came from, used for naming
        output_dir: Root directory; tiles/, sprites/ and deltas/ are created below it
        tiles, sprites, deltas: Which asset classes to write

    Returns:
        Number of files written
    """
    output_dir = Path(output_dir)
    written = 0

    if tiles and bitmaps.tiles:
        tile_dir = output_dir / 'tiles'
        tile_dir.mkdir(parents=True, exist_ok=True)
        for i, bitmap in enumerate(tqdm(bitmaps.tiles, desc='Tiles', dynamic_ncols=True)):
            written += save_bitmap(bitmap, tile_dir / f"tile_{i:04d}.png")

    if sprites and bitmaps.sprites:
        sprite_dir = output_dir / 'sprites'
        sprite_dir.mkdir(parents=True, exist_ok=True)
        for i, bitmap in enumerate(tqdm(bitmaps.sprites, desc='Sprites', dynamic_ncols=True)):
            written += save_bitmap(bitmap, sprite_dir / f"{sprite_name(style, i)}.png")

    if deltas and bitmaps.deltas:
        delta_dir = output_dir / 'deltas'
        delta_dir.mkdir(parents=True, exist_ok=True)
        frame_numbers: Dict[int, int] = {}
        frames = zip(bitmaps.deltas, bitmaps.delta_sources)
        for bitmap, source in tqdm(frames, total=len(bitmaps.deltas), desc='Deltas', dynamic_ncols=True):
            frame = frame_numbers.get(source, 0)
            frame_numbers[source] = frame + 1
            written += save_bitmap(bitmap, delta_dir / f"{sprite_name(style, source)}_d{frame:02d}.png")

    logger.info(f"Wrote {written} images to {output_dir}")
    return written

def _prepare_for_json(data: Any) -> Any:
    """Convert data to JSON-serializable format."""
    if hasattr(data, 'to_dict'):
        return _prepare_for_json(data.to_dict())
    elif isinstance(data, bytes):
        return data.hex()
    elif isinstance(data, dict):
        return {
            (k.name.lower() if hasattr(k, 'name') else k): _prepare_for_json(v)
            for k, v in data.items()
        }
    elif isinstance(data, (list, tuple)):
        return [_prepare_for_json(item) for item in data]
    return data

def style_metadata(style: StyleFile) -> Dict[str, Any]:
    """Collect everything except pixel data into plain Python values."""
    warnings: List[Dict[str, str]] = [
        {'type': type(w).__name__, 'message': str(w)} for w in style.warnings
    ]
    return _prepare_for_json({
        'version': style.version,
        'chunks': style.chunks,
        'counts': {
            'palettes': style.palette_count,
            'tiles': style.tile_count,
            'sprites': len(style.sprites),
            'delta_sets': len(style.delta_sets),
            'delta_frames': sum(len(d.sizes) for d in style.delta_sets),
        },
        'palette_allocation': style.palette_allocation,
        'sprite_allocation': style.sprite_allocation,
        'font_allocation': style.font_allocation,
        'sprites': style.sprites,
        'delta_sets': style.delta_sets,
        'vehicles': style.vehicles,
        'map_objects': style.map_objects,
        'recyclable_cars': style.recyclable_cars,
        'surfaces': style.surfaces,
        'warnings': warnings,
    })

def export_metadata(style: StyleFile, path: Union[str, Path]) -> Path:
    """Write style_metadata() as JSON to path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(style_metadata(style), f, indent=2)
    logger.info(f"Metadata written to {path}")
    return path
