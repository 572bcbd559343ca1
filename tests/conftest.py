import numpy as np
import pytest
from PIL import Image

from fedimoji.normalize import NormalizedGlyph

def solid(size, rgba):
  return Image.new('RGBA', size, rgba)

@pytest.fixture
def emoji_dir(tmp_path):
  d = tmp_path / 'emoji'
  d.mkdir()
  return d

@pytest.fixture
def write_emoji(emoji_dir):
  def write(name, size=(32, 32), rgba=(255, 0, 0, 255), ext='.png'):
    path = emoji_dir / (name + ext)
    solid(size, rgba).save(path)
    return path
  return write

def glyph(name, value=255):
  pixels = np.full((8, 8, 4), value, dtype=np.uint8)
  return NormalizedGlyph(name, pixels)

def names(n):
  return ['e%06d' % i for i in range(n)]
