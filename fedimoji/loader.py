"""Read emoji images from disk into RGBA pixel buffers."""
import logging
import os
from collections import namedtuple
from contextlib import contextmanager
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DuplicateNameError, InvalidAssetError

log = logging.getLogger(__name__)

# pixels: read-only uint8 array of shape (h, w, 4)
EmojiAsset = namedtuple('EmojiAsset', ['name', 'pixels'])

def asset_name(path):
  # file name without its extension, case and punctuation untouched
  return Path(os.fsdecode(path)).stem

def scan_emoji_dir(path):
  path = Path(path)
  if not path.is_dir():
    raise FileNotFoundError(2, 'emoji directory does not exist', str(path))
  # only formats pillow can read, not save-only ones like pdf
  extensions = {ext for ext, fmt in Image.registered_extensions().items()
      if fmt in Image.OPEN}
  files = [p for p in path.iterdir()
      if p.is_file() and p.suffix.lower() in extensions]
  return sorted(files, key=lambda p: p.name)

@contextmanager
def _decoding(name, path):
  try:
    yield
  except UnidentifiedImageError as err:
    raise InvalidAssetError(name, path, 'cannot decode image') from err
  except OSError as err:
    # open/read failures carry the file name, decoder failures do not
    if err.filename is not None:
      raise
    raise InvalidAssetError(name, path, 'cannot decode image: %s' % err) from err

def check_asset(path):
  """Admission checks that need no pixel data: name and header size."""
  name = asset_name(path)
  try:
    name.encode('utf-8')
  except UnicodeEncodeError as err:
    raise InvalidAssetError(name, path, 'file name is not valid utf-8') from err
  with _decoding(name, path):
    with Image.open(path) as img:
      width, height = img.size
  if width != height:
    raise InvalidAssetError(name, path,
        'image is %dx%d, emoji must be square' % (width, height))
  return name

def load_asset(path):
  name = check_asset(path)
  with _decoding(name, path):
    with Image.open(path) as img:
      pixels = np.array(img.convert('RGBA'), dtype=np.uint8)
  pixels.setflags(write=False)
  log.debug('loaded "%s" (%dx%d)', name, pixels.shape[1], pixels.shape[0])
  return EmojiAsset(name, pixels)

def load_assets(paths):
  paths = list(paths)
  # names must be unique before anything gets decoded
  seen = {}
  for p in paths:
    seen.setdefault(asset_name(p), []).append(p)
  for name in sorted(seen):
    if len(seen[name]) > 1:
      raise DuplicateNameError(name, seen[name])
  # header pass: a bad file fails the run before any pixels are decoded
  for p in paths:
    check_asset(p)
  assets = [load_asset(p) for p in paths]
  log.info('loaded %d emoji images', len(assets))
  return assets
