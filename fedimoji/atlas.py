import logging

import numpy as np
from PIL import Image

log = logging.getLogger(__name__)

# the font provider encodes one atlas row per string of GRID_COLUMNS chars,
# changing either constant changes the output format.
GRID_COLUMNS = 16
GLYPH_SIZE = 8

def grid_rows(count):
  return (count + GRID_COLUMNS - 1) // GRID_COLUMNS

def atlas_size(count):
  # (width, height) in pixels
  return GRID_COLUMNS * GLYPH_SIZE, grid_rows(count) * GLYPH_SIZE

def pack_atlas(allocated):
  width, height = atlas_size(len(allocated))
  # zeros: unused cells stay fully transparent
  atlas = np.zeros((height, width, 4), dtype=np.uint8)
  for a in allocated:
    x, y = a.col * GLYPH_SIZE, a.row * GLYPH_SIZE
    atlas[y:y+GLYPH_SIZE, x:x+GLYPH_SIZE] = a.glyph.pixels
    log.debug('copied "%s" to (%d, %d)', a.name, x, y)
  atlas.setflags(write=False)
  log.info('packed %dx%d pixel atlas', width, height)
  return atlas

def atlas_image(atlas):
  return Image.fromarray(np.ascontiguousarray(atlas))
