"""Resample emoji to the fixed in-game glyph resolution.

All glyphs of a run are held in memory at once. That is fine for a few
thousand emoji, much larger sets would want batching here.
"""
import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from PIL import Image

from .atlas import GLYPH_SIZE

log = logging.getLogger(__name__)

NormalizedGlyph = namedtuple('NormalizedGlyph', ['name', 'pixels'])

def resample(pixels):
  # box filter averages the source area of every target pixel. pillow
  # premultiplies alpha for rgba so transparent fringes don't bleed colour.
  img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
  img = img.resize((GLYPH_SIZE, GLYPH_SIZE), Image.Resampling.BOX)
  out = np.array(img, dtype=np.uint8)
  out.setflags(write=False)
  return out

def normalize(asset):
  pixels = resample(asset.pixels)
  log.debug('resized "%s" %dx%d -> %dx%d', asset.name,
      asset.pixels.shape[1], asset.pixels.shape[0], GLYPH_SIZE, GLYPH_SIZE)
  return NormalizedGlyph(asset.name, pixels)

def normalize_all(assets, workers=1):
  assets = list(assets)
  if workers and workers > 1:
    # map() keeps input order, nothing to reassemble
    with ThreadPoolExecutor(max_workers=workers) as pool:
      glyphs = list(pool.map(normalize, assets))
  else:
    glyphs = [normalize(a) for a in assets]
  log.info('normalized %d glyphs to %dx%d', len(glyphs), GLYPH_SIZE, GLYPH_SIZE)
  return glyphs
