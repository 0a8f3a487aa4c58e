from typing import Iterator, List, Optional, Type

from .parse_tree import PTNode
from .exceptions import InvalidPattern, ParseError


class Finder(object):
    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        raise NotImplementedError


class Pattern(object):
    def __init__(self):
        self._finder: Optional[Finder] = None

    @classmethod
    def make(cls, o) -> 'Pattern':
        if isinstance(o, Pattern):
            return o
        elif isinstance(o, str):
            return PText(o)
        else:
            raise InvalidPattern('Can not make a pattern from {!r}'.format(o))

    def __add__(self, pattern) -> 'Pattern':
        return PAdjacent([self, self.make(pattern)])

    def __radd__(self, pattern) -> 'Pattern':
        return PAdjacent([self.make(pattern), self])

    def __or__(self, pattern) -> 'Pattern':
        return PAny([self, self.make(pattern)])

    def __ror__(self, pattern) -> 'Pattern':
        return PAny([self.make(pattern), self])

    @property
    def finder(self) -> Finder:
        if self._finder is None:
            # circular dependency
            from .plain import compile_pattern
            self._finder = compile_pattern(self)
        return self._finder

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        """Match pattern at <start> of <text>, return the parse tree or None

        Matching never backtracks: the first alternative that matches is taken
        and repeats are greedy.
        """
        return self.finder.match(text, start)

    def finditer(self, text: str) -> Iterator[PTNode]:
        """Find pattern in text, yield them one after another"""
        finder = self.finder
        cur = 0
        ll = len(text)

        while cur <= ll:
            pt = finder.match(text, cur)
            if pt is None:
                cur += 1
                continue
            yield pt
            cur = pt.index1 if pt.index1 > cur else cur + 1

    def extract(self, text: str) -> List[PTNode]:
        """Extract info from text by the pattern, and return every non-empty match"""
        return [n for n in self.finditer(text) if n]

    extractall = extract

    def findall(self, text: str) -> List[str]:
        return [n.content for n in self.finditer(text)]


class PText(Pattern):
    """A plain pattern that just match text as it is"""

    def __init__(self, text: str):
        super().__init__()
        self.text = text

    def __repr__(self):
        return repr(self.text)


class PTag(Pattern):
    def __init__(self, pattern: Pattern, tag: str):
        super().__init__()
        self.pattern = pattern
        assert tag is not None
        self.tag = tag

    def __repr__(self):
        return '(?<{}>:{})'.format(self.tag, self.pattern)


class PInChars(Pattern):
    """A single character out of <chars>"""

    def __init__(self, chars: str):
        super().__init__()
        self.chars: str = chars

    def __repr__(self):
        return '[{}]'.format(self.chars)


class PAny(Pattern):
    """Ordered choice, the first pattern that matches wins"""

    def __init__(self, patterns: List[Pattern]):
        super().__init__()
        self.patterns: List[Pattern] = patterns

    def __or__(self, pattern) -> Pattern:
        return PAny(list(self.patterns) + [self.make(pattern)])

    def __ror__(self, pattern) -> Pattern:
        return PAny([self.make(pattern)] + list(self.patterns))

    def __repr__(self):
        return '|'.join(['(' + str(p) + ')' for p in self.patterns])


class PRepeat(Pattern):
    """Greedy repeat, which never gives back what it has consumed"""

    def __init__(self, pattern: Pattern, _from: int, _to: int = None):
        super().__init__()
        self.pattern: Pattern = pattern
        if _to is not None:
            assert _to >= _from
        self._from: int = _from
        self._to: Optional[int] = _to

    def __repr__(self):
        to = self._to if isinstance(self._to, int) else ''
        return '(%s){%s,%s}' % (self.pattern, self._from, to)


class PAdjacent(Pattern):
    def __init__(self, patterns: List[Pattern]):
        super().__init__()
        assert len(patterns) >= 1
        self.patterns = patterns

    def __add__(self, pattern) -> Pattern:
        return PAdjacent(list(self.patterns) + [self.make(pattern)])

    def __radd__(self, pattern) -> Pattern:
        return PAdjacent([self.make(pattern)] + list(self.patterns))

    def __repr__(self):
        return ''.join('({})'.format(p) for p in self.patterns)


class PCommit(Pattern):
    """A pattern that must match, or the whole parse fails with <error>"""

    def __init__(self, pattern: Pattern, error: Type[ParseError] = ParseError):
        super().__init__()
        self.pattern: Pattern = pattern
        self.error: Type[ParseError] = error

    def __repr__(self):
        return '(!{})'.format(self.pattern)


class PEnding(Pattern):
    def __repr__(self):
        return '$'


class P(object):
    @staticmethod
    def ic(chars: str) -> Pattern:
        """In Chars"""
        return PInChars(chars)

    @staticmethod
    def tag(pattern, tag: str) -> Pattern:
        """tag a pattern"""
        return PTag(Pattern.make(pattern), tag=tag)

    @staticmethod
    def repeat(pattern, _from: int = None, _to: int = None, exact: int = None) -> Pattern:
        """repeat a pattern some times

        if _to is None, repeat time upbound is not limited
        """
        if exact is not None:
            _from = exact
            _to = exact

        if _from is None:
            _from = 0

        if _to is not None and _to < _from:
            raise InvalidPattern('Repeat upper bound less than lower bound')

        return PRepeat(Pattern.make(pattern), _from=_from, _to=_to)

    n = repeat

    @classmethod
    def n01(cls, pattern) -> Pattern:
        """A pattern can be both match or not"""
        return cls.repeat(Pattern.make(pattern), 0, 1)

    @staticmethod
    def any(*patterns) -> Pattern:
        """Try to match patterns in order, select the first one match"""
        return PAny([Pattern.make(p) for p in patterns])

    @staticmethod
    def pattern(pattern) -> Pattern:
        return Pattern.make(pattern)

    @staticmethod
    def commit(pattern, error: Type[ParseError] = ParseError) -> Pattern:
        """Once reached, <pattern> has to match, otherwise <error> is raised"""
        return PCommit(Pattern.make(pattern), error=error)

    ENDING: Pattern


P.ENDING = PEnding()
