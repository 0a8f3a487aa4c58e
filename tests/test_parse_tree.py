import re

from surf.parse_tree import PTNode, VirtualPTNode


ANSI = re.compile(r'\x1b\[[0-9;]*m')


def test_parse_tree():
    text = 'abcdef'

    node = PTNode(text, 0, 3, children=[
        VirtualPTNode(text, 0, 2, children=[
            PTNode(text, 0, 1),
            PTNode(text, 1, 2),
        ]),
    ])

    assert node.children == [
        PTNode(text, 0, 1),
        PTNode(text, 1, 2)
    ]


def test_parse_tree2():
    """Empty nodes are hidden"""
    text = 'abcdef'

    node = PTNode(text, 0, 3, children=[
        VirtualPTNode(text, 0, 2, children=[
            PTNode(text, 0, 1),
            PTNode(text, 1, 1),
            PTNode(text, 1, 2),
        ]),
    ])

    assert node.children == [
        PTNode(text, 0, 1),
        PTNode(text, 1, 2)
    ]


def test_parse_tree3():
    text = 'abcdef'

    node = PTNode(text, 0, 5, children=[
        PTNode(text, 0, 3, children=[
            VirtualPTNode(text, 0, 2, children=[
                PTNode(text, 0, 1),
                PTNode(text, 1, 2),
            ])
        ]),
    ])

    assert node.children == [
        PTNode(text, 0, 3, children=[
            PTNode(text, 0, 1),
            PTNode(text, 1, 2),
        ]),
    ]


def test_empty_tagged_node_kept():
    text = 'a//b'

    node = PTNode(text, 0, 4, children=[
        PTNode(text, 1, 2),
        PTNode(text, 2, 2, tag='segment'),
        PTNode(text, 2, 2),
    ])

    assert node.children == [
        PTNode(text, 1, 2),
        PTNode(text, 2, 2, tag='segment'),
    ]


def test_content_and_rest():
    node = PTNode('grid!example.com', 5, 12)
    assert node.content == 'example'
    assert node.rest == '.com'
    assert node.string == 'grid!example.com'
    assert node.start() == 5
    assert node.end() == 12
    assert node
    assert not PTNode('abc', 1, 1)


def test_fetch():
    text = 'k=v&x=y'

    node = PTNode(text, 0, 7, children=[
        PTNode(text, 0, 3, tag='pair', children=[
            PTNode(text, 0, 1, tag='key'),
            PTNode(text, 1, 2),
            PTNode(text, 2, 3, tag='value'),
        ]),
        PTNode(text, 3, 4),
        PTNode(text, 4, 7, tag='pair', children=[
            PTNode(text, 4, 5, tag='key'),
            PTNode(text, 5, 6),
            PTNode(text, 6, 7, tag='value'),
        ]),
    ])

    assert [n.content for n in node.fetch('key')] == ['k', 'x']
    assert [n.content for n in node.fetch('pair')] == ['k=v', 'x=y']
    assert node.first('value').content == 'v'
    assert node.first('fragment') is None


def test_drop():
    text = 'abc'
    node = PTNode(text, 0, 3, tag='t', children=[PTNode(text, 0, 1)])
    assert node.drop() == PTNode(text, 0, 3, tag='t')


def test_show_tree():
    text = 'ab'
    node = PTNode(text, 0, 2, children=[
        PTNode(text, 0, 1, tag='x'),
        VirtualPTNode(text, 1, 2),
    ])
    node.show()

    from surf.parse_tree import show_tree
    assert show_tree(node) == '+ (0, 2)\n  + (0, 1) <x>\n  - (1, 2)'


def test_highlight_keeps_text():
    text = 'say grid!example.com/a please'
    node = PTNode(text, 4, 22, children=[
        PTNode(text, 9, 20, tag='host'),
        PTNode(text, 21, 22, tag='segment'),
    ])
    assert ANSI.sub('', node.highlight()) == 'say grid!example.com/a please'


def test_highlight_elides_long_context():
    text = 'x' * 20 + 'abc' + 'y' * 20
    node = PTNode(text, 20, 23, tag='host')
    assert ANSI.sub('', node.highlight()) == '...' + 'x' * 10 + 'abc' + 'y' * 10 + '...'
