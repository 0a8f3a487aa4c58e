import re
import json

import pytest

from surf.cli import main


ANSI = re.compile(r'\x1b\[[0-9;]*m')


def lines(out):
    return [json.loads(line) for line in out.splitlines()]


def test_parse_addresses(capsys):
    main(['grid!example.com/a?k=v#f', 'example.com/b x'])

    out = capsys.readouterr().out
    assert lines(out) == [
        {'host': 'example.com', 'path': ['a'], 'query': {'k': 'v'}, 'fragment': 'f', 'rest': ''},
        {'host': 'example.com', 'path': ['b'], 'query': {}, 'fragment': None, 'rest': ' x'},
    ]


def test_malformed_query_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['grid!example.com?novalue', 'grid!ok'])
    assert exc_info.value.code == 1

    captured = capsys.readouterr()
    assert 'grid!example.com?novalue: query at offset 24' in captured.err
    assert lines(captured.out) == [
        {'host': 'ok', 'path': [], 'query': {}, 'fragment': None, 'rest': ''},
    ]


def test_strict(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--strict', 'grid!example.com/b x'])
    assert exc_info.value.code == 1
    assert 'eof at offset 18' in capsys.readouterr().err


def test_input_file(tmp_path, capsys):
    path = tmp_path / 'addresses.txt'
    path.write_text('grid!a/b\n\n  grid://c#d  \n')

    main(['-i', str(path)])

    assert lines(capsys.readouterr().out) == [
        {'host': 'a', 'path': ['b'], 'query': {}, 'fragment': None, 'rest': ''},
        {'host': 'c', 'path': [], 'query': {}, 'fragment': 'd', 'rest': ''},
    ]


def test_missing_input_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['-i', str(tmp_path / 'missing.txt')])
    assert exc_info.value.code == 2
    assert 'File does not exist' in capsys.readouterr().err


def test_highlight(capsys):
    main(['--highlight', 'grid!example.com/a?k=v#f'])
    out = capsys.readouterr().out
    assert ANSI.sub('', out) == 'grid!example.com/a?k=v#f\n'


def test_verbose(capsys):
    main(['-v', 'grid!a'])
    assert lines(capsys.readouterr().out)[0]['host'] == 'a'


def test_strict_highlight(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--strict', '--highlight', 'grid!example.com/b x'])
    assert exc_info.value.code == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'eof at offset 18' in captured.err


def test_strict_highlight_whole_address(capsys):
    main(['--strict', '--highlight', 'grid!example.com/b'])
    assert ANSI.sub('', capsys.readouterr().out) == 'grid!example.com/b\n'
