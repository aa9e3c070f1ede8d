"""Defines classes for representing note headers, classified lines, and tag queries.

The most important classes are :class:`Header` and :class:`TagQuery`
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Union, Iterable, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from notefd.accessors.base import ReadError


@dataclass(frozen=True)
class Header:
    """The title and tags extracted from the first few lines of a note file.

    Instances are created by :meth:`notefd.accessors.note.NoteAccessor.info` and are not modified afterward.
    """

    path: str
    """The path of the file, exactly as it was found while scanning."""

    title: Optional[str] = None
    """All title lines from the header joined with single spaces, or None if there were no title lines.

    Note that a blank line before the tag list counts as a title line, so this may be an empty string.
    """

    tags: FrozenSet[str] = frozenset()
    """Lowercase tags from the tag list line (e.g. "journal" or "project-idea").

    This is empty if the header had no tag list line, or if the tag list was ``[]``.
    """

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'path': self.path,
            'title': self.title,
            'tags': sorted(self.tags),
        }


@dataclass(frozen=True)
class Title:
    """A header line that is free text."""

    text: str
    """The line with leading and trailing whitespace removed."""


@dataclass(frozen=True)
class TagList:
    """A header line of the form ``[word1 word2 ...]``."""

    words: Tuple[str, ...] = ()
    """The words in the order they appeared, with their original case."""


ClassifiedLine = Union[Title, TagList]


@dataclass(frozen=True)
class TagQuery:
    """Represents the tags a note must have in order to be reported.

    Some methods that take a TagQuery parameter also accept an iterable of tag strings as a convenience, which
    they pass to :meth:`parse`.
    """

    include_tags: FrozenSet[str] = field(default_factory=frozenset)
    """The query should only return notes that have *all* of the specified tags.

    If empty, every note matches.
    """

    @classmethod
    def parse(cls, tags: TagQueryIsh) -> TagQuery:
        """Converts the parameter to a TagQuery, if it isn't one already.

        You can pass a comma-separated string like ``"work,urgent"`` or an iterable of strings like
        ``['Work', 'urgent']``. Tags are lowercased, so both examples produce the same query.
        """
        if isinstance(tags, TagQuery):
            return tags
        if isinstance(tags, str):
            return cls.parse(t.strip() for t in tags.split(',') if t.strip())
        return cls(frozenset(t.lower() for t in tags))

    def matches(self, header: Header) -> bool:
        return self.include_tags.issubset(header.tags)


TagQueryIsh = Union[str, Iterable[str], TagQuery]


@dataclass
class SearchResult:
    """The outcome of searching one candidate file.

    Exactly one of :attr:`header` and :attr:`error` is set.
    """

    path: str

    header: Optional[Header] = None
    """Set when the file was read and matched the query."""

    error: Optional[ReadError] = None
    """Set when the file could not be read."""

    def as_json(self) -> dict:
        if self.error:
            return {'path': self.path, 'message': self.error.message}
        return self.header.as_json()
