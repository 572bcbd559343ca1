import argparse
import logging
import sys

from .config import load_config
from .errors import FedimojiError
from .pipeline import run

log = logging.getLogger('fedimoji')

def parse_args(argv=None):
  p = argparse.ArgumentParser(prog='fedimoji',
      description='pack a directory of square emoji images into a bitmap font atlas')
  p.add_argument('--emoji-dir', help='directory containing emoji images (default ./emoji)')
  p.add_argument('--output-dir', help='output directory (default ./out)')
  p.add_argument('-i', '--import', dest='import_map', metavar='FILE',
      help='existing fedimoji.json whose code points are kept')
  p.add_argument('-c', '--config', help='json file with settings')
  p.add_argument('--namespace', help='resource pack namespace of the atlas texture')
  p.add_argument('--preview', metavar='FILE', help='also render an atlas preview (pdf/png)')
  p.add_argument('-j', '--workers', type=int, help='threads used for resizing')
  p.add_argument('-v', '--verbose', action='store_true', default=None)
  return p.parse_args(argv)

def main(argv=None):
  args = parse_args(argv)
  overrides = dict(vars(args))
  config_path = overrides.pop('config')
  try:
    cfg = load_config(config_path, **overrides)
  except FedimojiError as err:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    log.error('%s', err)
    return 1

  logging.basicConfig(level=logging.DEBUG if cfg.verbose else logging.INFO,
      format='%(levelname)s: %(message)s')
  try:
    run(cfg)
  except (FedimojiError, OSError) as err:
    log.error('%s', err)
    return 1
  return 0

if __name__ == '__main__':
  sys.exit(main())
