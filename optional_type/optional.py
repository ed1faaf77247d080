from typing import *
from .error import InvalidValueError
from .marker import Marker, marker_of
from .marker_option import MarkerOption
from .typing import Nullable, Undefinable


_T = TypeVar('_T')
_R = TypeVar('_R')


class Optional(Generic[_T]):
    """
    A container which may or may not hold a value.

    Absence is decided per instance by its MarkerOption: a stored ``None`` or
    ``undefined`` counts as "no value" only when its marker is in
    ``option.invalid``, and construction fails when the marker is invalid but
    not in ``option.allowed``. Use the factories ``of``, ``of_nullable``,
    ``of_undefinable`` and ``empty`` rather than calling the constructor.
    """

    __slots__ = ("_value", "_option")

    def __init__(self, value: Undefinable[_T] = None, option: MarkerOption = MarkerOption.UNDEFINABLE):
        if option.rejects(marker_of(value)):
            raise InvalidValueError()
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_option", option)

    def __setattr__(self, key, value):
        raise AttributeError("Optional is immutable")

    def __reduce__(self):
        return Optional, (self._value, self._option)

    @staticmethod
    def of(value: _T) -> 'Optional[_T]':
        """
        Returns an Optional describing the given value, which must be neither
        ``None`` nor ``undefined``.

        :raises InvalidValueError: if value is ``None`` or ``undefined``
        """
        return Optional(value, MarkerOption.STRICT)

    @staticmethod
    def of_nullable(value: Nullable[_T]) -> 'Optional[_T]':
        """
        Returns an Optional describing the given value, or an empty Optional
        if it is ``None``. ``undefined`` is kept as an ordinary value.
        """
        return Optional(value, MarkerOption.NULLABLE)

    @staticmethod
    def of_undefinable(value: Undefinable[_T]) -> 'Optional[_T]':
        """
        Returns an Optional describing the given value, or an empty Optional
        if it is ``None`` or ``undefined``.
        """
        return Optional(value, MarkerOption.UNDEFINABLE)

    @staticmethod
    def empty() -> 'Optional[Any]':
        return Optional()

    @property
    def option(self) -> MarkerOption:
        return self._option

    def is_present(self) -> bool:
        return not self._option.is_invalid(marker_of(self._value))

    def if_present(self, action: Callable[[_T], Any]) -> None:
        if self.is_present():
            action(self._value)

    def if_present_or_else(self, action: Callable[[_T], Any], empty_action: Callable[[], Any]) -> None:
        if self.is_present():
            action(self._value)
        else:
            empty_action()

    def or_else(self, other: Nullable[_T]) -> Nullable[_T]:
        return self._value if self.is_present() else other

    def or_else_get(self, supplier: Callable[[], _T]) -> _T:
        return self._value if self.is_present() else supplier()

    def or_else_throw(self, error: Union[BaseException, Type[BaseException]]) -> _T:
        if not self.is_present():
            raise error
        return self._value

    def get(self) -> _T:
        """
        Returns the value, or raises InvalidValueError when no value is present.

        Prefer ``is_present``, ``if_present`` or the ``or_else`` family; this
        one fails on every call made on an empty Optional.
        """
        if not self.is_present():
            raise InvalidValueError()
        return self._value

    def filter(self, predicate: Callable[[_T], bool]) -> 'Optional[_T]':
        # predicate also sees the stored marker of an empty Optional
        result = predicate(self._value)
        return self if result and self.is_present() else Optional.empty()

    def map(self, mapper: Callable[[_T], _R]) -> 'Optional[_R]':
        if not self.is_present():
            return Optional.empty()
        value = mapper(self._value)
        if self._option.rejects(marker_of(value)):
            return Optional.empty()
        return Optional(value, self._option)

    def flat_map(self, mapper: Callable[[_T], _R]) -> Union[_R, 'Optional[_T]']:
        """
        Like ``map``, but returns the mapper's result as it is instead of
        wrapping it. An empty Optional is returned when no value is present or
        the result is rejected, so check the outcome with
        ``isinstance(result, Optional)``.
        """
        if not self.is_present():
            return Optional.empty()
        value = mapper(self._value)
        if self._option.rejects(marker_of(value)):
            return Optional.empty()
        return value

    def __eq__(self, other):
        if not isinstance(other, Optional):
            return NotImplemented
        if not self.is_present() or not other.is_present():
            return self.is_present() == other.is_present()
        return self._value == other._value

    def __hash__(self):
        if not self.is_present():
            return hash(Marker.NULL)
        return hash(self._value)

    def __str__(self):
        if not self.is_present():
            return "Optional.empty"
        return "Optional[{}]".format(self._value)

    def __repr__(self):
        if not self.is_present():
            return "<Optional.empty>"
        return "<Optional: {!r}>".format(self._value)


__all__ = ["Optional", ]
