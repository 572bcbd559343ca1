import json
import logging

from .codepoints import is_allocatable
from .errors import MappingImportError

log = logging.getLogger(__name__)

def build_emoticon_map(allocated):
  # name -> single character, keyed in name order
  return {a.name: a.char for a in allocated}

def load_emoticon_map(path):
  """Read a name map written by an earlier run, as name -> code point."""
  with open(path, 'r', encoding='utf-8') as f:
    try:
      data = json.load(f)
    except ValueError as err:
      raise MappingImportError(path, 'not valid json: %s' % err) from err
  if not isinstance(data, dict):
    raise MappingImportError(path, 'expected a json object of name -> character')

  mapping = {}
  owners = {}
  for name, value in data.items():
    if not name:
      continue
    if not isinstance(value, str) or len(value) != 1:
      raise MappingImportError(path, '"%s" must map to a single character' % name)
    cp = ord(value)
    if not is_allocatable(cp):
      raise MappingImportError(path,
          '"%s" uses U+%04X, outside the private use ranges' % (name, cp))
    if cp in owners:
      raise MappingImportError(path,
          '"%s" and "%s" share U+%04X' % (owners[cp], name, cp))
    owners[cp] = name
    mapping[name] = cp
  log.info('imported %d existing mappings', len(mapping))
  return mapping
