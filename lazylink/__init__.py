from .lazylist import LazyList, lazy_list
from .cursor import Cursor
from .chain import Node, NodeChain
from .generator import GeneratorSlot
from .errors import (
    LazyListError, OutOfRangeError, InvalidCursorError, ForeignNodeError,
    GeneratorExhausted, NotCopyableError
)
