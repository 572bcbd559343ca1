"""Assign private use code points to glyphs.

Glyphs are ordered by name (utf-8 byte order) so a fixed input set always
gets the same code points, no matter how the filesystem lists it. Code points
come from three private use ranges, consumed in order:

  U+E000   - U+F8FF     6400 values
  U+F0000  - U+FFFFD   65534 values
  U+100000 - U+10FFFD  65534 values

The last two stop short of the plane's trailing noncharacters.
"""
import logging
from collections import namedtuple

from .atlas import GRID_COLUMNS
from .errors import CapacityExceededError

log = logging.getLogger(__name__)

# inclusive bounds
RANGES = (
  (0xE000, 0xF8FF),
  (0xF0000, 0xFFFFD),
  (0x100000, 0x10FFFD),
)
CAPACITY = sum(last - first + 1 for first, last in RANGES)

class AllocatedGlyph(namedtuple('AllocatedGlyph', ['glyph', 'codepoint', 'grid_index'])):
  __slots__ = ()

  @property
  def name(self):
    return self.glyph.name

  @property
  def row(self):
    return self.grid_index // GRID_COLUMNS

  @property
  def col(self):
    return self.grid_index % GRID_COLUMNS

  @property
  def char(self):
    return chr(self.codepoint)

def is_allocatable(cp):
  return any(first <= cp <= last for first, last in RANGES)

def iter_codepoints(reserved=()):
  reserved = set(reserved)
  for first, last in RANGES:
    for cp in range(first, last + 1):
      if cp not in reserved:
        yield cp

def sort_glyphs(glyphs):
  return sorted(glyphs, key=lambda g: g.name.encode('utf-8'))

def allocate(glyphs, existing=None):
  """Return one AllocatedGlyph per glyph, in grid (name) order.

  `existing` maps names to code points kept from an earlier run. All of its
  code points are reserved, names found in it keep theirs and every other
  glyph takes the next free code point.
  """
  existing = existing or {}
  glyphs = sort_glyphs(glyphs)
  fresh = sum(1 for g in glyphs if g.name not in existing)
  free = CAPACITY - len(set(existing.values()))
  if fresh > free:
    raise CapacityExceededError(len(glyphs), fresh - free)

  available = iter_codepoints(existing.values())
  allocated = []
  for index, glyph in enumerate(glyphs):
    if glyph.name in existing:
      cp = existing[glyph.name]
      log.debug('using existing mapping for "%s", U+%04X', glyph.name, cp)
    else:
      cp = next(available)
      log.debug('using new mapping for "%s", U+%04X', glyph.name, cp)
    allocated.append(AllocatedGlyph(glyph, cp, index))
  log.info('allocated %d code points (%d kept from import)',
      len(allocated), len(allocated) - fresh)
  return allocated
