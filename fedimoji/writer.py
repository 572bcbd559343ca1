"""Persist the atlas, font provider and name map of a finished pack.

All three files are first written next to their targets and only renamed
into place once every one of them is complete.
"""
import io
import json
import logging
import os
import tempfile
from pathlib import Path

from .atlas import atlas_image
from .descriptor import provider_json

log = logging.getLogger(__name__)

def output_paths(cfg):
  out = Path(cfg.output_dir)
  return {
    'atlas': out / cfg.atlas_name,
    'font': out / cfg.font_name,
    'map': out / cfg.map_name,
  }

def _json_bytes(obj):
  return (json.dumps(obj, indent=2, ensure_ascii=False) + '\n').encode('utf-8')

def _png_bytes(atlas):
  buf = io.BytesIO()
  atlas_image(atlas).save(buf, format='PNG')
  return buf.getvalue()

def _file_mode():
  # mkstemp creates 0600, outputs get the mode a plain open() would give
  umask = os.umask(0)
  os.umask(umask)
  return 0o666 & ~umask

def write_outputs(pack, cfg):
  paths = output_paths(cfg)
  contents = {
    'atlas': _png_bytes(pack.atlas),
    'font': _json_bytes(provider_json(pack.descriptor)),
    'map': _json_bytes(pack.emoticons),
  }
  for p in paths.values():
    p.parent.mkdir(parents=True, exist_ok=True)

  mode = _file_mode()
  staged = {}
  try:
    for key, data in contents.items():
      fd, tmp = tempfile.mkstemp(dir=paths[key].parent, prefix='.' + paths[key].name)
      staged[key] = tmp
      with os.fdopen(fd, 'wb') as f:
        f.write(data)
      os.chmod(tmp, mode)
    for key, tmp in staged.items():
      os.replace(tmp, paths[key])
      log.info('wrote %s', paths[key])
  finally:
    for tmp in staged.values():
      if os.path.exists(tmp):
        os.unlink(tmp)
  return paths
