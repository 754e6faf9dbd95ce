"""
Bitmap reconstruction.

Turns the raw records of a StyleFile into RGBA bitmaps by resolving
virtual palettes through PALX to the physical palettes of PPAL. Every
function here is a pure function of its inputs.
"""
from dataclasses import dataclass, field
from typing import List, Tuple
import logging

import numpy as np

from .chunks.dels import DeltaPatch, read_patches
from .constants import PALETTE_CATEGORIES, SPRITE_STRIDE
from .errors import IndexOutOfRange
from .models import StyleFile
from .utils.binary import BinaryReader

logger = logging.getLogger(__name__)

@dataclass
class Bitmap:
    """RGBA image owning its pixel data."""
    width: int
    height: int
    pixels: np.ndarray       # (height, width, 4) uint8

    @classmethod
    def from_indices(cls, indices: np.ndarray, palette: np.ndarray) -> 'Bitmap':
        """Map a 2D array of palette indices through a (256, 4) palette."""
        height, width = indices.shape
        return cls(width, height, palette[indices])

    @property
    def flat(self) -> np.ndarray:
        """Pixels as a flat (width * height, 4) array, row major."""
        return self.pixels.reshape(-1, 4)

    def copy(self) -> 'Bitmap':
        return Bitmap(self.width, self.height, self.pixels.copy())

@dataclass
class StyleBitmaps:
    """Reconstructed bitmaps of one style file."""
    tiles: List[Bitmap] = field(default_factory=list)
    sprites: List[Bitmap] = field(default_factory=list)
    deltas: List[Bitmap] = field(default_factory=list)
    delta_sources: List[int] = field(default_factory=list)   # Sprite index of each delta frame

def resolve_palette(style: StyleFile, category: str, index: int) -> int:
    """Find the physical palette used by an asset.

    Args:
        style: Decoded style file
        category: Palette allocation category, e.g. 'tile' or 'sprite'
        index: Asset number within the category

    Returns:
        Physical palette number

    Raises:
        IndexOutOfRange: If the virtual or physical palette does not exist, or
            a category other than tile is looked up without a PALB table
    """
    if style.palette_allocation is not None:
        base = style.palette_allocation[category].offset
    elif category == PALETTE_CATEGORIES[0]:
        # The first category always starts at 0
        base = 0
    else:
        raise IndexOutOfRange(f"No palette allocation table, cannot place {category} {index}")
    virtual = base + index
    if style.palette_index is None or virtual >= len(style.palette_index):
        raise IndexOutOfRange(f"Virtual palette {virtual} ({category} {index}) outside palette index")

    physical = int(style.palette_index[virtual])
    if physical >= style.palette_count:
        raise IndexOutOfRange(
            f"Virtual palette {virtual} ({category} {index}) maps to physical palette "
            f"{physical}, only {style.palette_count} decoded"
        )
    return physical

def reconstruct_tiles(style: StyleFile) -> List[Bitmap]:
    """Build an RGBA bitmap for every tile."""
    if style.tiles is None:
        return []

    bitmaps = []
    for i, tile in enumerate(style.tiles):
        palette = style.palettes[resolve_palette(style, 'tile', i)]
        bitmaps.append(Bitmap.from_indices(tile, palette))
    logger.debug(f"Reconstructed {len(bitmaps)} tiles")
    return bitmaps

def sprite_indices(style: StyleFile, index: int) -> np.ndarray:
    """Cut the palette indices of one sprite out of the sprite store."""
    sprite = style.sprites[index]
    store = style.sprite_store if style.sprite_store is not None else np.empty(0, np.uint8)

    rows = np.arange(sprite.height)[:, None] * SPRITE_STRIDE
    cols = np.arange(sprite.width)[None, :]
    positions = sprite.offset + rows + cols
    if positions.size and positions.max() >= len(store):
        raise IndexOutOfRange(
            f"Sprite {index} ({sprite.width}x{sprite.height} at {sprite.offset}) "
            f"runs past the sprite store ({len(store)} bytes)"
        )
    return store[positions]

def reconstruct_sprites(style: StyleFile) -> List[Bitmap]:
    """Build an RGBA bitmap for every sprite record."""
    bitmaps = []
    for i in range(len(style.sprites)):
        palette = style.palettes[resolve_palette(style, 'sprite', i)]
        bitmaps.append(Bitmap.from_indices(sprite_indices(style, i), palette))
    logger.debug(f"Reconstructed {len(bitmaps)} sprites")
    return bitmaps

def apply_patches(frame: Bitmap, patches: List[DeltaPatch], palette: np.ndarray) -> None:
    """Overwrite the runs of a delta frame in place."""
    position = 0
    for patch in patches:
        position += patch.skip
        x, y = position % SPRITE_STRIDE, position // SPRITE_STRIDE
        length = len(patch.pixels)
        if y >= frame.height or x + length > frame.width:
            raise IndexOutOfRange(
                f"Delta run of {length} pixels at ({x}, {y}) outside "
                f"{frame.width}x{frame.height} sprite"
            )
        frame.pixels[y, x:x + length] = palette[np.frombuffer(patch.pixels, dtype=np.uint8)]
        position += length

def reconstruct_deltas(style: StyleFile, sprites: List[Bitmap]) -> Tuple[List[Bitmap], List[int]]:
    """Build every delta frame from its base sprite.

    Args:
        style: Decoded style file
        sprites: Output of reconstruct_sprites() for the same style

    Returns:
        (frames, source sprite index of each frame)
    """
    frames: List[Bitmap] = []
    sources: List[int] = []
    if not style.delta_sets:
        return frames, sources

    store = BinaryReader(style.delta_store if style.delta_store is not None else b'')
    for delta_set in style.delta_sets:
        if delta_set.sprite >= len(sprites):
            raise IndexOutOfRange(
                f"Delta set targets sprite {delta_set.sprite}, only {len(sprites)} sprites"
            )
        base = sprites[delta_set.sprite]
        palette = style.palettes[resolve_palette(style, 'sprite', delta_set.sprite)]

        for size in delta_set.sizes:
            frame = base.copy()
            apply_patches(frame, read_patches(store, size), palette)
            frames.append(frame)
            sources.append(delta_set.sprite)

    if not store.is_exhausted():
        logger.warning(f"{store.remaining} unused bytes left in the delta store")
    logger.debug(f"Reconstructed {len(frames)} delta frames")
    return frames, sources

def build_bitmaps(style: StyleFile) -> StyleBitmaps:
    """Reconstruct tiles, sprites and delta frames of a style file."""
    sprites = reconstruct_sprites(style)
    deltas, sources = reconstruct_deltas(style, sprites)
    return StyleBitmaps(
        tiles=reconstruct_tiles(style),
        sprites=sprites,
        deltas=deltas,
        delta_sources=sources
    )
