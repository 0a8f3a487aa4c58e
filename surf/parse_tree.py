from typing import Iterator, List, Optional

from termcolor import colored


__all__ = [
    'PTNode', 'VirtualPTNode'
]


class PTNode(object):
    """Parse Tree Node

    A node is a span [index0, index1) over the parsed text. The text itself is
    shared by every node of a tree and never copied; <content> slices on demand.
    """

    def __init__(self, text: str, start: int, end: int, children: List['PTNode'] = None, tag=None):
        self.text: str = text
        assert end >= start >= 0
        self.index0: int = start
        self.index1: int = end
        self._children: List['PTNode'] = children or []
        self.tag: Optional[str] = tag

    @property
    def string(self) -> str:
        return self.text

    @property
    def content(self) -> str:
        return self.text[self.index0: self.index1]

    @property
    def rest(self) -> str:
        """Text after the node"""
        return self.text[self.index1:]

    # start(), end() as methods, simulating re MatchObject behaviour
    def start(self) -> int:
        return self.index0

    def end(self) -> int:
        return self.index1

    @property
    def children(self) -> List['PTNode']:
        return node_children(self)

    def __repr__(self):
        c = '{}, {}, content={}'.format(self.index0, self.index1, repr(self.content))
        if self.tag:
            c += ', tag={}'.format(repr(self.tag))
        elif self.children:
            c += ', children=[{}]'.format(', '.join([repr(n) for n in self.children]))
        return '{}('.format(self.__class__.__name__) + c + ')'

    def __bool__(self):
        return self.index1 > self.index0

    @classmethod
    def lead(cls, pts: List['PTNode'], text: str = None, start: int = None) -> 'PTNode':
        """Make a new PTNode as the common parent of nodes <pts>

        An empty <pts> makes an empty node at <start>.
        """
        if not pts:
            assert text is not None and start is not None
            return cls(text, start, start)

        for p1, p2 in zip(pts[:-1], pts[1:]):
            assert p1.index1 == p2.index0

        return cls(pts[0].text, pts[0].index0, pts[-1].index1, children=list(pts))

    def fetch(self, tag) -> Iterator['PTNode']:
        """Fetch those nodes whose tag == <tag>, in text order"""
        if self.tag == tag:
            yield self
        for n in self.children:
            yield from n.fetch(tag)

    def first(self, tag) -> Optional['PTNode']:
        """The first node tagged <tag>, or None"""
        for n in self.fetch(tag):
            return n
        return None

    def drop(self) -> 'PTNode':
        """Copy the PTNode but without children"""
        return self.__class__(self.text, self.index0, self.index1, tag=self.tag)

    def __eq__(self, o):
        if isinstance(o, PTNode):
            return self.text == o.text \
                and self.index0 == o.index0 \
                and self.index1 == o.index1 \
                and self.children == o.children \
                and self.tag == o.tag
        return False

    def highlight(self) -> str:
        """The node's text with every tagged part coloured, for terminals"""
        return highlight_tree(self)

    def pp(self):
        """Pretty Print in terminals, designed for terminal users"""
        print(self.highlight())

    def show(self):
        """Show tree structure in detail, designed for pdb debugging"""
        print(show_tree(self))


class VirtualPTNode(PTNode):
    """A class of nodes that is transparent to callers"""


def node_children(n: PTNode) -> List[PTNode]:
    return list(iter_node_children(n))


def iter_node_children(n: PTNode) -> Iterator[PTNode]:
    # empty nodes are hidden unless tagged, an empty tagged node still says
    # something (an empty path segment, an empty fragment)
    for c in n._children:
        if not isinstance(c, VirtualPTNode):
            if c or c.tag is not None:
                yield c
        else:
            yield from iter_node_children(c)


def show_tree(tree: PTNode) -> str:

    def _show_tree(node: PTNode, depth=0) -> str:
        assert isinstance(node, PTNode)
        mark = '-' if isinstance(node, VirtualPTNode) else '+'
        text = '{}{} ({}, {})'.format('  ' * depth, mark, node.start(), node.end())
        if node.tag is not None:
            text += ' <{}>'.format(node.tag)
        subs = [_show_tree(sub, depth + 1) for sub in node._children]
        return '\n'.join([text] + subs)

    return _show_tree(tree)


COLORS = ['red', 'green', 'yellow', 'blue', 'magenta', 'cyan']


def tag_color(tag: Optional[str]) -> str:
    if tag is None:
        return 'white'
    return COLORS[sum(map(ord, tag)) % len(COLORS)]


def highlight_tree(tree: PTNode, extend_n: int = 10) -> str:
    # for i in tag_lst, tag_lst[i] is the tag most close to the leaf
    tag_lst: List[Optional[str]] = [None] * (tree.index1 - tree.index0)

    start0 = tree.index0

    def set_tag(node, tl):
        """Traverse the parse tree and set tag_lst"""
        if node.tag is not None:
            for i in range(node.index0 - start0, node.index1 - start0):
                tl[i] = node.tag
        for cn in node.children:
            set_tag(cn, tl)

    set_tag(tree, tag_lst)

    # extend several chars on both sides
    left_i = max(0, tree.index0 - extend_n)
    right_i = min(len(tree.text), tree.index1 + extend_n)

    left_str = tree.text[left_i: tree.index0]
    left_str = ('...' + left_str) if left_i > 0 else left_str

    right_str = tree.text[tree.index1: right_i]
    right_str = (right_str + '...') if right_i < len(tree.text) else right_str

    ws = colored(left_str, attrs=['dark']) if left_str else ''
    for offset, tag in enumerate(tag_lst):
        i = tree.index0 + offset
        ws += colored(tree.text[i], tag_color(tag))
    if right_str:
        ws += colored(right_str, attrs=['dark'])
    return ws
