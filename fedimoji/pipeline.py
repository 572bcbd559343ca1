"""Emoji directory -> atlas, font provider and name map.

Each stage is a plain function over the previous stage's result:

  paths -> EmojiAsset -> NormalizedGlyph -> AllocatedGlyph -> atlas/descriptor/map

Nothing is written until the whole pack is built in memory.
"""
import logging
from collections import namedtuple

from .atlas import pack_atlas
from .codepoints import allocate
from .config import texture_reference
from .descriptor import build_font_descriptor
from .emoticons import build_emoticon_map, load_emoticon_map
from .errors import EmptyInputError
from .loader import load_assets, scan_emoji_dir
from .normalize import normalize_all
from .writer import write_outputs

log = logging.getLogger(__name__)

Pack = namedtuple('Pack', ['allocated', 'atlas', 'descriptor', 'emoticons'])

def build_pack(paths, file, existing=None, workers=1):
  glyphs = normalize_all(load_assets(paths), workers=workers)
  allocated = allocate(glyphs, existing)
  return Pack(
    allocated,
    pack_atlas(allocated),
    build_font_descriptor(allocated, file),
    build_emoticon_map(allocated),
  )

def run(cfg):
  paths = scan_emoji_dir(cfg.emoji_dir)
  if not paths:
    raise EmptyInputError(cfg.emoji_dir)
  log.info('found %d emoji images in %s', len(paths), cfg.emoji_dir)

  existing = None
  if cfg.import_map:
    existing = load_emoticon_map(cfg.import_map)

  pack = build_pack(paths, texture_reference(cfg), existing, cfg.workers)
  write_outputs(pack, cfg)
  if cfg.preview:
    # matplotlib is only pulled in when a preview is asked for
    from .preview import render_preview
    render_preview(pack, cfg.preview)
  log.info('done! generated pack with %d glyphs', len(pack.allocated))
  return pack
