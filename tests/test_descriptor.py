import pytest

from conftest import glyph

from fedimoji.codepoints import allocate
from fedimoji.descriptor import build_font_descriptor, build_rows, provider_json
from fedimoji.emoticons import build_emoticon_map

def allocated(n):
  return allocate([glyph('g%03d' % i) for i in range(n)])

@pytest.mark.parametrize('n', [1, 15, 16, 17, 31, 32, 33, 100])
def test_rows_padded(n):
  rows = build_rows(allocated(n))
  assert len(rows) == (n + 15) // 16
  assert all(len(r) == 16 for r in rows)
  assert sum(c != '\0' for r in rows for c in r) == n

def test_seventeen_glyphs():
  rows = build_rows(allocated(17))
  assert rows[0] == ''.join(chr(cp) for cp in range(0xE000, 0xE010))
  assert rows[1] == chr(0xE010) + '\0' * 15

def test_descriptor_fields():
  d = build_font_descriptor(allocated(3), 'fedimoji:font/emoji.png')
  assert d.file == 'fedimoji:font/emoji.png'
  assert d.ascent == 8 and d.height == 8
  provider = provider_json(d)['providers'][0]
  assert provider['type'] == 'bitmap'
  assert provider['file'] == d.file
  assert provider['chars'] == d.rows

def test_name_map_matches_grid():
  a = allocated(40)
  rows = build_rows(a)
  m = build_emoticon_map(a)
  by_name = {x.name: x for x in a}
  for name, ch in m.items():
    assert len(ch) == 1
    x = by_name[name]
    assert ord(rows[x.row][x.col]) == ord(ch)
