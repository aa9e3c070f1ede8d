"""Defines the API for finding and reading notes under a directory.

The most important class is :class:`Repo`.
"""

from typing import Iterator, List

from notefd.models import Header, SearchResult, TagQuery, TagQueryIsh


class Repo:
    """Base class for repos, which are responsible for finding notes and searching them by tag.

    Repo instances use :class:`notefd.accessors.base.Accessor` instances to read individual files.
    """
    def candidates(self, root: str) -> List[str]:
        """Returns the sorted, duplicate-free paths of all note files at or under the given path.

        Directories that cannot be listed are treated as empty. A nonexistent root yields an empty list.
        """
        raise NotImplementedError()

    def info(self, path: str) -> Header:
        """Reads the header of the given file.

        Raises :exc:`notefd.accessors.base.ReadError` if the file cannot be read.
        """
        raise NotImplementedError()

    def query(self, query: TagQueryIsh = TagQuery(), root: str = '.') -> Iterator[SearchResult]:
        """Yields a result for each note under root that matches the query or could not be read.

        Results are in the same order as :meth:`candidates`. Notes that were read successfully but
        do not match the query are omitted.
        """
        raise NotImplementedError()
