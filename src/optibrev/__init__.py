"""
optibrev – optional values as a first-class type.

Import path convention::

    from optibrev import Nothing, Option, Some
    from optibrev.errors import EmptyUnwrapError
    from optibrev.observability import configure_logging
"""

from optibrev.errors import EmptyUnwrapError
from optibrev.option import Nothing, Option, Some

__version__ = "0.1.0"
__all__ = ["EmptyUnwrapError", "Nothing", "Option", "Some", "__version__"]
