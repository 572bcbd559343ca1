import json
import os
import sys

import pytest

from fedimoji.cli import main, parse_args

def test_parse_args():
  args = parse_args(['--emoji-dir', 'in', '-i', 'old.json', '-v', '-j', '3'])
  assert args.emoji_dir == 'in'
  assert args.import_map == 'old.json'
  assert args.verbose is True
  assert args.workers == 3
  assert args.output_dir is None

def test_main_ok(tmp_path, emoji_dir, write_emoji):
  write_emoji('wave')
  out = tmp_path / 'out'
  assert main(['--emoji-dir', str(emoji_dir), '--output-dir', str(out),
      '--namespace', 'chat']) == 0
  font = json.loads((out / 'emoji.json').read_text(encoding='utf-8'))
  assert font['providers'][0]['file'] == 'chat:font/emoji.png'
  assert json.loads((out / 'fedimoji.json').read_text(encoding='utf-8')) == {'wave': chr(0xE000)}

def test_main_errors(tmp_path, emoji_dir, write_emoji):
  write_emoji('tall', size=(8, 9))
  assert main(['--emoji-dir', str(emoji_dir), '--output-dir', str(tmp_path / 'o')]) == 1
  assert main(['--emoji-dir', str(tmp_path / 'missing')]) == 1
  assert main(['--config', str(tmp_path / 'nope.json')]) == 1

@pytest.mark.skipif(sys.platform != 'linux', reason='needs byte file names')
def test_main_non_utf8_name(tmp_path, emoji_dir, write_emoji):
  write_emoji('ok')
  with open(os.path.join(os.fsencode(emoji_dir), b'caf\xe9.png'), 'wb') as f:
    f.write((emoji_dir / 'ok.png').read_bytes())
  out = tmp_path / 'out'
  assert main(['--emoji-dir', str(emoji_dir), '--output-dir', str(out)]) == 1
  assert not out.exists()
