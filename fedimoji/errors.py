# every failure here is fatal to the run, the cli turns them into exit status 1.

class FedimojiError(Exception):
  pass

class InvalidAssetError(FedimojiError):
  def __init__(self, name, path, reason):
    self.name = name
    self.path = path
    self.reason = reason
    super().__init__('emoji "%s" (%s): %s' % (name, path, reason))

class DuplicateNameError(FedimojiError):
  def __init__(self, name, paths):
    self.name = name
    self.paths = list(paths)
    super().__init__('emoji name "%s" is used by more than one file: %s'
        % (name, ', '.join(str(p) for p in self.paths)))

class CapacityExceededError(FedimojiError):
  def __init__(self, count, excess):
    self.count = count
    self.excess = excess
    super().__init__('%d glyphs requested, %d could not be assigned: '
        'U+E000-U+F8FF, U+F0000-U+FFFFD and U+100000-U+10FFFD are exhausted'
        % (count, excess))

class EmptyInputError(FedimojiError):
  def __init__(self, path):
    self.path = path
    super().__init__('no emoji images found in %s' % (path,))

class MappingImportError(FedimojiError):
  def __init__(self, path, reason):
    self.path = path
    self.reason = reason
    super().__init__('imported mapping %s: %s' % (path, reason))

class ConfigError(FedimojiError):
  pass
