"""Surf plain matching engine

Every pattern class is compiled to a finder. A finder's match() returns the
parse tree of the one match starting at <start>, or None when there is none.
"""

from typing import List, Optional, Type
from functools import singledispatch

from .exceptions import ParseError
from .parse_tree import PTNode, VirtualPTNode
from .pattern import (
    Finder,
    Pattern,
    PText, PTag, PInChars,
    PAny, PRepeat, PAdjacent,
    PCommit, PEnding)


__all__ = [
    'compile_pattern',
    'FinderPlain'
]


def compile_pattern(pattern: Pattern) -> Finder:
    return _compile_pattern(pattern)


@singledispatch
def _compile_pattern(pattern: Pattern) -> 'FinderPlain':
    raise TypeError('Pattern {} can\'t be compiled'.format(pattern.__class__))


class FinderPlain(Finder):
    def __init__(self, pattern: Pattern):
        self.pattern: Pattern = pattern

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        """Match pattern from <text>, start at <start>"""
        raise NotImplementedError


@_compile_pattern.register(PText)
class FText(FinderPlain):
    def __init__(self, pattern: PText):
        super().__init__(pattern)
        self.text = pattern.text

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        if text.startswith(self.text, start):
            return PTNode(text, start=start, end=start + len(self.text))
        return None


@_compile_pattern.register(PTag)
class FTag(FinderPlain):
    def __init__(self, pattern: PTag):
        super().__init__(pattern)
        self.finder = _compile_pattern(pattern.pattern)
        self.tag = pattern.tag

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        pt = self.finder.match(text, start)
        if pt is not None:
            pt.tag = self.tag
        return pt


@_compile_pattern.register(PInChars)
class FInChars(FinderPlain):
    def __init__(self, pattern: PInChars):
        super().__init__(pattern)
        self.chars = frozenset(pattern.chars)

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        if start < len(text) and text[start] in self.chars:
            return PTNode(text, start=start, end=start + 1)
        return None


@_compile_pattern.register(PAny)
class FAny(FinderPlain):
    def __init__(self, pattern: PAny):
        super().__init__(pattern)
        self.finders = [_compile_pattern(p) for p in pattern.patterns]

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        for finder in self.finders:
            pt = finder.match(text, start)
            if pt is not None:
                return pt
        return None


@_compile_pattern.register(PRepeat)
class FRepeat(FinderPlain):
    def __init__(self, pattern: PRepeat):
        super().__init__(pattern)
        self.finder = _compile_pattern(pattern.pattern)
        self._from: int = pattern._from
        self._to: Optional[int] = pattern._to

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        nodes: List[PTNode] = []
        cur = start
        while self._to is None or len(nodes) < self._to:
            pt = self.finder.match(text, cur)
            if pt is None:
                break
            nodes.append(hide(pt))
            if pt.index1 == cur:
                # an empty match would repeat forever
                break
            cur = pt.index1
        if len(nodes) < self._from:
            return None
        return PTNode.lead(nodes, text=text, start=start)


@_compile_pattern.register(PAdjacent)
class FAdjacent(FinderPlain):
    def __init__(self, pattern: PAdjacent):
        super().__init__(pattern)
        self.finders: List[FinderPlain] = [_compile_pattern(p) for p in pattern.patterns]

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        nodes: List[PTNode] = []
        cur = start
        for finder in self.finders:
            pt = finder.match(text, cur)
            if pt is None:
                return None
            nodes.append(pt)
            cur = pt.index1
        return PTNode.lead(nodes)


@_compile_pattern.register(PCommit)
class FCommit(FinderPlain):
    def __init__(self, pattern: PCommit):
        super().__init__(pattern)
        self.finder = _compile_pattern(pattern.pattern)
        self.error: Type[ParseError] = pattern.error

    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        pt = self.finder.match(text, start)
        if pt is None:
            raise self.error(text, start)
        return pt


@_compile_pattern.register(PEnding)
class FEnding(FinderPlain):
    def match(self, text: str, start: int = 0) -> Optional[PTNode]:
        if start == len(text):
            return PTNode(text, start=start, end=start)
        return None


def hide(pt: PTNode) -> PTNode:
    """Make an untagged node transparent, so that only its children show up"""
    if pt.tag is not None or isinstance(pt, VirtualPTNode):
        return pt
    return VirtualPTNode(pt.text, pt.index0, pt.index1, children=pt._children)
