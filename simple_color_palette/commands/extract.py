"""Build a palette from the dominant colours of an image.

Quantizes every pixel to 32-level bins per channel, ranks the bins by pixel
count and keeps the top --count (default COLOR_PALETTE_EXTRACT_COUNT). Each
kept bin becomes an unnamed, opaque colour at the bin centre, most common
first. Samples up to 50000 pixels; sampling is seeded so output is stable.

Example:
    color-palette extract photo.jpg photo.color-palette --count 6 --name Photo
"""

import os
import sys

import numpy as np
from PIL import Image

from simple_color_palette.adapters.arrays import palette_from_array
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.types import Command

command = Command(name='extract', help='Build a palette from the dominant colours of an image.')

_MAX_SAMPLES = 50000
_BIN = 32


def dominant_colours(image: Image.Image, count: int) -> np.ndarray:
    """Return up to `count` dominant colours as a (K, 3) array of 0-1 sRGB values."""
    pixels = np.array(image.convert('RGB')).reshape(-1, 3)
    if len(pixels) > _MAX_SAMPLES:
        indices = np.random.default_rng(42).choice(len(pixels), _MAX_SAMPLES, replace=False)
        pixels = pixels[indices]

    quantized = (pixels.astype(np.int64) // _BIN) * _BIN + _BIN // 2
    unique, counts = np.unique(quantized, axis=0, return_counts=True)
    # Stable sort keeps ties in bin order
    order = np.argsort(-counts, kind='stable')[:count]
    return unique[order] / 255.0


def extract_palette(image: Image.Image, count: int, name: str | None = None) -> ColorPalette:
    return palette_from_array(dominant_colours(image, count), linear=False, name=name)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to a PNG/JPG image')
    parser.add_argument('output', help='Palette file to write')
    parser.add_argument('-k', '--count', type=int, default=None, help='Number of colours to keep')
    parser.add_argument('-n', '--name', default=None, help='Palette name')


@command.run
def run(args, settings) -> int:
    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        return 1
    count = args.count or settings.extract_count

    with Image.open(args.image) as image:
        palette = extract_palette(image, count, name=args.name)
    palette.save(args.output)
    print(f'extracted {len(palette.colors)} colours from {args.image} to {args.output}')
    return 0
