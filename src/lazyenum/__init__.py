"""
lazyenum: lazy, composable sequence operators.

Elixir-style ``Stream``/``Enum`` combinators over any Python iterable,
finite or infinite, evaluated one pull at a time.
"""

from lazyenum.config import EnumConfig, RunSizeStrategy
from lazyenum.errors import LazyEnumError, InvalidArgumentError, EmptySequenceError
from lazyenum.defaults import MISSING
from lazyenum.streams import Stream, PullIterator
from lazyenum.algorithms import sort, frequencies, group_by
from lazyenum import eager

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "EnumConfig",
    "RunSizeStrategy",
    "LazyEnumError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "MISSING",
    "Stream",
    "PullIterator",
    "sort",
    "frequencies",
    "group_by",
    "eager",
]

# Configure default settings
EnumConfig.set_defaults()
