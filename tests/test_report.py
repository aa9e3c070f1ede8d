import json
from notefd.accessors.base import ReadError
from notefd.conf import DEFAULT_REPORT_TEMPLATE
from notefd.models import Header, SearchResult
from notefd.report import render_json, render_table, render_text


def results():
    return [
        SearchResult('./a.note.txt', header=Header('./a.note.txt', 'My Title', frozenset({'work', 'urgent'}))),
        SearchResult('./b.note.txt', error=ReadError('./b.note.txt')),
        SearchResult('./c.note', header=Header('./c.note')),
    ]


def test_render_text():
    assert render_text(results(), DEFAULT_REPORT_TEMPLATE) == """@ ./a.note.txt
  > My Title
  [ urgent work ]
Error: Failed to read file: ./b.note.txt
@ ./c.note
  >
  [  ]
"""


def test_render_text_custom_template():
    template = '${header.path}: ${", ".join(sorted(header.tags))}\n'
    assert render_text(results(), template) == """./a.note.txt: urgent, work
Error: Failed to read file: ./b.note.txt
./c.note: \n"""


def test_render_text_empty():
    assert render_text([], DEFAULT_REPORT_TEMPLATE) == ''


def test_render_table():
    assert render_table(results()) == """+--------------+----------+--------+
| Path         | Title    | Tags   |
+--------------+----------+--------+
| ./a.note.txt | My Title | urgent |
|              |          | work   |
| ./c.note     |          |        |
+--------------+----------+--------+
Error: Failed to read file: ./b.note.txt
"""


def test_render_json():
    assert json.loads(render_json(results())) == {
        'matches': [
            {'path': './a.note.txt', 'title': 'My Title', 'tags': ['urgent', 'work']},
            {'path': './c.note', 'title': None, 'tags': []},
        ],
        'errors': [
            {'path': './b.note.txt', 'message': 'Failed to read file: ./b.note.txt'},
        ]
    }
