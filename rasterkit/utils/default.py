from typing import Callable, Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def value_or_factory(value: Optional[T], factory: Callable[[], T]) -> T:
    """Like value_or_default, but only builds the default when it is needed."""
    return value if value is not None else factory()
