import logging
import re
from itertools import islice
from typing import FrozenSet, Iterable, List, Tuple

from notefd.accessors.base import Accessor, ReadError
from notefd.models import ClassifiedLine, Header, TagList, Title

logger = logging.getLogger(__name__)

DEFAULT_MAX_HEADER_LINES = 5

WORD_CHARS = r'A-Za-z0-9!@#$%^&*()\-=_+{}\\|:;\'",./<>?'
WORD_RE = re.compile(rf'[{WORD_CHARS}]+')
TAG_LIST_RE = re.compile(rf'(?a)\s*\[\s*((?:[{WORD_CHARS}]+(?:\s+|(?=\])))*)\]\s*')


def classify_line(line: str) -> ClassifiedLine:
    """Decides whether a line is a tag list or a title.

    A tag list is a pair of square brackets around zero or more whitespace-separated words, with nothing
    but whitespace outside the brackets. Words may contain ASCII letters, digits, and most ASCII punctuation
    (but not brackets, backticks, or tildes). Any other line is a title.
    """
    match = TAG_LIST_RE.fullmatch(line)
    if match:
        return TagList(tuple(WORD_RE.findall(match.group(1))))
    return Title(line.strip())


def fold_lines(lines: Iterable[str]) -> Tuple[List[str], FrozenSet[str]]:
    """Collects title lines until the first tag list line, and returns them along with the lowercased tags.

    Lines after the first tag list line are not consumed from the iterable.
    """
    title_lines = []
    tags = set()
    for line in lines:
        classified = classify_line(line)
        if isinstance(classified, TagList):
            tags.update(w.lower() for w in classified.words)
            break
        title_lines.append(classified.text)
    return title_lines, frozenset(tags)


class NoteAccessor(Accessor):
    """Responsible for reading the header of a note file.

    Only the first few lines of the file are examined (five by default). Each line is either a title line
    or a tag list line; the header ends at the first tag list line. All title lines before it are joined
    with spaces to form the title.

    Here's an example note whose header has the title "Groceries for the week" and the tags
    ``errands`` and ``food``:

    .. code-block:: text

       Groceries
       for the week
       [errands Food]
       The body is never examined, even if it contains [more tags].
    """
    def __init__(self, path: str, max_lines: int = DEFAULT_MAX_HEADER_LINES):
        super().__init__(path)
        self.max_lines = max_lines

    def _load(self):
        logger.debug('Reading header of %s', self.path)
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as file:
                lines = (line.rstrip('\r\n') for line in islice(file, self.max_lines))
                self.title_lines, self.tags = fold_lines(lines)
        except OSError as e:
            raise ReadError(self.path, e) from e

    def _info(self) -> Header:
        title = ' '.join(self.title_lines) if self.title_lines else None
        return Header(self.path, title, self.tags)
