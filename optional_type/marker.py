'''
缺失值标记

Python 只有 None 一个原生的空值, 这里额外提供 undefined 单例, 用来表示 "没有设置" 的值.
判断标记时只比较对象身份, 不做字符串转换, 所以 "None" 和 "undefined" 这样的字符串都是普通的值.
'''

from typing import *
from enum import Enum


class Marker(Enum):
    VALUE = "value"
    NULL = "null"
    UNDEFINED = "undefined"

    def __repr__(self):
        return "<Marker: {}>".format(self.value)


class Undefined:
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Undefined, cls).__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __reduce__(self):
        return "undefined"

    def __repr__(self):
        return "undefined"


undefined = Undefined()


def marker_of(value: Any) -> Marker:
    if value is None:
        return Marker.NULL
    if value is undefined:
        return Marker.UNDEFINED
    return Marker.VALUE


__all__ = ["Marker", "Undefined", "undefined", "marker_of"]
