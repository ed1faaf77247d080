from .error import *
from .marker import Marker, Undefined, undefined, marker_of
from .marker_option import MarkerOption
from .typing import Nullable, Undefinable
from .optional import Optional


__title__ = 'optional_type'
__version__ = '1.0.5'
__author__ = '宋伟(songwei)'
__license__ = 'MIT'
__copyright__ = '2018, 宋伟(songwei)'
