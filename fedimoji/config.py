import json

from dotmap import DotMap

from .errors import ConfigError

DEFAULTS = {
  'emoji_dir': './emoji',
  'output_dir': './out',
  'namespace': 'fedimoji',
  'texture': 'font/emoji.png',
  'atlas_name': 'emoji.png',
  'font_name': 'emoji.json',
  'map_name': 'fedimoji.json',
  'import_map': None,
  'preview': None,
  'workers': 1,
  'verbose': False,
}

def load_config(path=None, **overrides):
  cfg = DotMap(DEFAULTS, _dynamic=False)
  if path is not None:
    try:
      with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    except (OSError, ValueError) as err:
      raise ConfigError('cannot read config %s: %s' % (path, err)) from err
    if not isinstance(data, dict):
      raise ConfigError('config %s must be a json object' % (path,))
    _merge(cfg, data, path)
  _merge(cfg, {k: v for k, v in overrides.items() if v is not None}, 'arguments')
  return cfg

def _merge(cfg, values, source):
  unknown = sorted(set(values) - set(DEFAULTS))
  if unknown:
    raise ConfigError('unknown setting(s) in %s: %s' % (source, ', '.join(unknown)))
  for k, v in values.items():
    cfg[k] = v

def texture_reference(cfg):
  # resource location of the atlas as seen from the font file
  return '%s:%s' % (cfg.namespace, cfg.texture)
