"""Bitmap font provider for the packed atlas.

The client cuts the atlas into a grid: one string in `chars` per atlas row,
one character per cell. Every string must be exactly GRID_COLUMNS long, cells
without a glyph hold U+0000.
"""
import logging
from collections import namedtuple

from .atlas import GLYPH_SIZE, GRID_COLUMNS, grid_rows

log = logging.getLogger(__name__)

FontDescriptor = namedtuple('FontDescriptor', ['file', 'ascent', 'height', 'rows'])

def build_rows(allocated):
  cells = ['\0'] * (grid_rows(len(allocated)) * GRID_COLUMNS)
  for a in allocated:
    cells[a.grid_index] = a.char
  return [''.join(cells[r:r+GRID_COLUMNS])
      for r in range(0, len(cells), GRID_COLUMNS)]

def build_font_descriptor(allocated, file):
  rows = build_rows(allocated)
  log.info('font descriptor: %d rows of %d glyphs', len(rows), GRID_COLUMNS)
  return FontDescriptor(file, GLYPH_SIZE, GLYPH_SIZE, rows)

def provider_json(descriptor):
  # layout of the client's font definition file
  return {
    'providers': [
      {
        'type': 'bitmap',
        'file': descriptor.file,
        'height': descriptor.height,
        'ascent': descriptor.ascent,
        'chars': list(descriptor.rows),
      }
    ]
  }
