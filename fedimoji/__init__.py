"""Pack emoji images into a bitmap font atlas with private use code points."""
from .errors import (CapacityExceededError, ConfigError, DuplicateNameError,
    EmptyInputError, FedimojiError, InvalidAssetError, MappingImportError)
from .pipeline import Pack, build_pack, run

__version__ = '0.1.0'
