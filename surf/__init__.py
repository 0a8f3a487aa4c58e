from .exceptions import SurfException, InvalidPattern, ParseError, MalformedQuery, TrailingInput
from .parse_tree import PTNode
from .pattern import Pattern, P
from .surf import Surf, parse_surf, parse_tree


__version__ = '0.1.0'
