import numpy as np

from conftest import glyph

from fedimoji.atlas import atlas_image, atlas_size, grid_rows, pack_atlas
from fedimoji.codepoints import allocate

def test_sizes():
  assert grid_rows(0) == 0
  assert grid_rows(1) == 1
  assert grid_rows(16) == 1
  assert grid_rows(17) == 2
  assert atlas_size(17) == (128, 16)

def test_seventeen_glyphs():
  glyphs = [glyph('g%02d' % i, value=i + 1) for i in range(17)]
  atlas = pack_atlas(allocate(glyphs))
  assert atlas.shape == (16, 128, 4)
  assert atlas.dtype == np.uint8
  for i in range(16):
    assert (atlas[0:8, i*8:i*8+8] == i + 1).all()
  # row 1: glyph 16 at column 0, the rest transparent
  assert (atlas[8:16, 0:8] == 17).all()
  assert (atlas[8:16, 8:] == 0).all()

def test_image_mode():
  img = atlas_image(pack_atlas(allocate([glyph('a')])))
  assert img.mode == 'RGBA'
  assert img.size == (128, 8)
