"""Formats search results for printing.

Generally, you should use :func:`notefd.cli.main` rather than calling these directly.
"""

import json
from typing import Iterable, List

from mako.template import Template
from terminaltables import AsciiTable

from notefd.models import SearchResult


def error_line(result: SearchResult) -> str:
    return f'Error: {result.error.message}\n'


def render_text(results: Iterable[SearchResult], template: str) -> str:
    """Renders each match with the given Mako template, and each failure as an ``Error:`` line."""
    compiled = Template(template)
    parts = []
    for result in results:
        if result.error:
            parts.append(error_line(result))
        else:
            parts.append(compiled.render(header=result.header))
    return ''.join(parts)


def render_table(results: Iterable[SearchResult]) -> str:
    results = list(results)
    data = [('Path', 'Title', 'Tags')]
    for result in results:
        if result.header:
            header = result.header
            data.append((header.path, header.title or '', '\n'.join(sorted(header.tags))))
    text = AsciiTable(data).table + '\n'
    return text + ''.join(error_line(r) for r in results if r.error)


def render_json(results: Iterable[SearchResult]) -> str:
    matches: List[dict] = []
    errors: List[dict] = []
    for result in results:
        (errors if result.error else matches).append(result.as_json())
    return json.dumps({'matches': matches, 'errors': errors})
