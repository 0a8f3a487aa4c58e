import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from . import grammar
from .exceptions import ParseError
from .parse_tree import PTNode


__all__ = [
    'Surf', 'parse_surf', 'parse_tree'
]


logger = logging.getLogger(__name__)


class Surf(object):
    """A parsed address: host, path segments, query and fragment

    Fields are plain strings copied out of the parsed text. Use parse_tree()
    for spans that refer back into the text instead.
    """

    __slots__ = ('_host', '_path', '_query', '_fragment')

    def __init__(self, host: str = '', path: Iterable[str] = (),
                 query: Mapping[str, str] = None, fragment: Optional[str] = None):
        self._host: str = host
        self._path: Tuple[str, ...] = tuple(path)
        self._query: Mapping[str, str] = MappingProxyType(dict(query or {}))
        self._fragment: Optional[str] = fragment

    @property
    def host(self) -> str:
        return self._host

    @property
    def path(self) -> Tuple[str, ...]:
        return self._path

    @property
    def query(self) -> Mapping[str, str]:
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    @classmethod
    def from_tree(cls, tree: PTNode) -> 'Surf':
        """Assemble a Surf from a parse tree made by the surf grammar"""
        host = tree.first('host')
        path = [n.content for n in tree.fetch('segment')]

        query: Dict[str, str] = {}
        for pair in tree.fetch('pair'):
            # later pairs overwrite earlier ones
            query[pair.first('key').content] = pair.first('value').content

        fragment = tree.first('fragment')
        return cls(
            host=host.content if host is not None else '',
            path=path,
            query=query,
            fragment=fragment.content if fragment is not None else None,
        )

    @classmethod
    def from_string(cls, text: str) -> 'Surf':
        """Parse <text> as a whole

        Raises MalformedQuery for a broken query, TrailingInput if anything
        is left after the address.
        """
        return cls.from_tree(parse_tree(text, strict=True))

    def unparse(self, scheme: str = grammar.DEFAULT_SCHEME) -> str:
        """The address as text, <scheme> may be empty"""
        s = scheme + self._host + ''.join('/' + seg for seg in self._path)
        if self._query:
            s += '?' + '&'.join('{}={}'.format(k, v) for k, v in self._query.items())
        if self._fragment is not None:
            s += '#' + self._fragment
        return s

    def as_dict(self) -> dict:
        return {
            'host': self._host,
            'path': list(self._path),
            'query': dict(self._query),
            'fragment': self._fragment,
        }

    def __str__(self):
        return self.unparse()

    def __repr__(self):
        return 'Surf(host={!r}, path={!r}, query={!r}, fragment={!r})'.format(
            self._host, list(self._path), dict(self._query), self._fragment)

    def __eq__(self, o):
        if isinstance(o, Surf):
            return self._host == o._host \
                and self._path == o._path \
                and dict(self._query) == dict(o._query) \
                and self._fragment == o._fragment
        return NotImplemented


def _match(pattern, text: str) -> PTNode:
    try:
        tree = pattern.match(text)
    except ParseError as e:
        logger.debug('Failed to parse %r: %s', text, e)
        raise
    if tree is None:
        raise ParseError(text, 0)
    return tree


def parse_tree(text: str, strict: bool = False) -> PTNode:
    """Parse the leading address of <text> into a parse tree

    Nodes are spans over <text>, tagged scheme, host, path, segment, query,
    pair, key, value and fragment. With <strict>, the whole of <text> has to be
    the address, otherwise TrailingInput is raised.
    """
    return _match(grammar.strict_surf if strict else grammar.surf, text)


def parse_surf(text: str) -> Tuple[Surf, str]:
    """Parse the leading address of <text>

    Return the Surf and the rest of <text> that is not part of it.
    """
    tree = parse_tree(text)
    if tree.rest:
        logger.debug('Trailing input after address: %r', tree.rest)
    return Surf.from_tree(tree), tree.rest
