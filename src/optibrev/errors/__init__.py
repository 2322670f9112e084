"""Error hierarchy — public re-export surface.

Hierarchy::

    OptibrevError
    ├── OptionError                  (option.py)
    │   └── EmptyUnwrapError         (also a ValueError)
    └── ConfigError                  (config.py)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from optibrev.errors.base import OptibrevError
from optibrev.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from optibrev.errors.option import EmptyUnwrapError, OptionError

__all__ = [
    "ConfigError",
    "EmptyUnwrapError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OptibrevError",
    "OptionError",
]
