"""Provides the :class:`DirectRepo` class."""

import logging
import os
import os.path
from typing import Iterator, List, Set

from notefd.accessors.base import ReadError
from notefd.accessors.note import NoteAccessor
from notefd.conf import NotefdConf
from notefd.models import Header, SearchResult, TagQuery, TagQueryIsh
from notefd.repos.base import Repo

logger = logging.getLogger(__name__)


class DirectRepo(Repo):
    """Reads notes directly from the filesystem without any caching.

    Symlinks are followed. A directory is not scanned again while it is already being scanned further up
    the same path, so symlink loops terminate, but separate symlinks to one directory are each scanned.

    .. attribute:: conf
       :type: NotefdConf
    """
    def __init__(self, conf: NotefdConf):
        self.conf = conf
        self.accessor_factory = NoteAccessor

    def candidates(self, root: str) -> List[str]:
        if os.path.isdir(root):
            paths = self._paths_in(root, set())
        elif os.path.isfile(root) and self.conf.is_note(os.path.basename(root)):
            paths = [root]
        else:
            paths = []
        return sorted(set(paths))

    def _paths_in(self, dirpath: str, visited: Set[str]) -> Iterator[str]:
        realpath = os.path.realpath(dirpath)
        if realpath in visited:
            logger.debug('Skipping already visited directory %s', dirpath)
            return
        try:
            entries = list(os.scandir(dirpath))
        except OSError as e:
            logger.debug('Skipping unreadable directory %s: %s', dirpath, e)
            return
        visited.add(realpath)
        try:
            for entry in entries:
                if self.conf.ignore(dirpath, entry.name):
                    continue
                try:
                    is_dir = entry.is_dir()
                    is_file = not is_dir and entry.is_file()
                except OSError as e:
                    logger.debug('Skipping %s: %s', entry.path, e)
                    continue
                if is_dir:
                    yield from self._paths_in(entry.path, visited)
                elif is_file and self.conf.is_note(entry.name):
                    yield entry.path
        finally:
            visited.discard(realpath)

    def info(self, path: str) -> Header:
        return self.accessor_factory(path, self.conf.max_header_lines).info()

    def query(self, query: TagQueryIsh = TagQuery(), root: str = '.') -> Iterator[SearchResult]:
        query = TagQuery.parse(query)
        for path in self.candidates(root):
            try:
                header = self.info(path)
            except ReadError as e:
                yield SearchResult(path, error=e)
                continue
            if query.matches(header):
                yield SearchResult(path, header=header)
