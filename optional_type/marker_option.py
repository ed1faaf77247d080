from typing import *
from .marker import Marker


class MarkerOption:
    STRICT: 'MarkerOption'
    NULLABLE: 'MarkerOption'
    UNDEFINABLE: 'MarkerOption'

    __slots__ = ("invalid", "allowed")

    def __init__(self, invalid: Iterable[Marker] = (), allowed: Iterable[Marker] = ()):
        invalid = frozenset(invalid)
        allowed = frozenset(allowed)
        for marker in invalid | allowed:
            if not isinstance(marker, Marker):
                raise TypeError("{!r} is not a Marker".format(marker))
            if marker is Marker.VALUE:
                raise TypeError("an ordinary value can not be an absence marker")
        object.__setattr__(self, "invalid", invalid)
        object.__setattr__(self, "allowed", allowed)

    def __setattr__(self, key, value):
        raise AttributeError("MarkerOption is immutable")

    def __reduce__(self):
        return MarkerOption, (tuple(self.invalid), tuple(self.allowed))

    def is_invalid(self, marker: Marker) -> bool:
        return marker in self.invalid

    def rejects(self, marker: Marker) -> bool:
        return marker in self.invalid and marker not in self.allowed

    def __eq__(self, other):
        if not isinstance(other, MarkerOption):
            return NotImplemented
        return self.invalid == other.invalid and self.allowed == other.allowed

    def __hash__(self):
        return hash((self.invalid, self.allowed))

    def __repr__(self):
        def names(markers):
            return sorted(marker.value for marker in markers)
        return "<MarkerOption: invalid={}, allowed={}>".format(names(self.invalid), names(self.allowed))


MarkerOption.STRICT = MarkerOption([Marker.NULL, Marker.UNDEFINED])
MarkerOption.NULLABLE = MarkerOption([Marker.NULL], [Marker.NULL])
MarkerOption.UNDEFINABLE = MarkerOption([Marker.NULL, Marker.UNDEFINED], [Marker.NULL, Marker.UNDEFINED])


__all__ = ["MarkerOption", ]
