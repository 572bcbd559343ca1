import logging

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .atlas import GLYPH_SIZE, GRID_COLUMNS

log = logging.getLogger(__name__)

# beyond this many rows the code point labels turn into noise
LABEL_ROWS = 32

def render_preview(pack, path):
  """Draw the atlas with its cell grid and code points, for eyeballing."""
  height, width = pack.atlas.shape[:2]
  rows = height // GLYPH_SIZE
  fig, ax = plt.subplots(figsize=(8, max(1.0, 0.5 * rows)))
  ax.imshow(pack.atlas, interpolation='nearest', extent=(0, width, height, 0))
  for c in range(GRID_COLUMNS + 1):
    ax.axvline(x=c*GLYPH_SIZE, color='0.6', linewidth=0.3)
  for r in range(rows + 1):
    ax.axhline(y=r*GLYPH_SIZE, color='0.6', linewidth=0.3)
  if rows <= LABEL_ROWS:
    for a in pack.allocated:
      ax.text(a.col*GLYPH_SIZE + 0.5, a.row*GLYPH_SIZE + GLYPH_SIZE - 0.5,
          '%04X' % a.codepoint, fontsize=3, color='tab:red')
  ax.set_xlim(0, width)
  ax.set_ylim(height, 0)
  ax.set_xticks([])
  ax.set_yticks([])
  ax.set_title('%d glyphs' % len(pack.allocated))
  fig.canvas.draw()
  fig.savefig(path)
  plt.close(fig)
  log.info('wrote preview %s', path)
  return path
