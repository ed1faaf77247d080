from typing import TypeVar, Union
from .marker import Undefined


T = TypeVar('T')

Nullable = Union[T, None]
Undefinable = Union[T, None, Undefined]


__all__ = ["Nullable", "Undefinable"]
