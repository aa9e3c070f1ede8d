"""Provides the main entry point for using the library, :class:`Notefd`"""

from __future__ import annotations
from typing import List

from notefd.conf import NotefdConf
from notefd.models import SearchResult, TagQueryIsh
from notefd.repos.direct import DirectRepo


class Notefd:
    """Main entry point for searching notes programmatically.

    Generally, you should get an instance using the :meth:`Notefd.for_user` method.

    .. attribute:: conf
       :type: notefd.conf.NotefdConf

       Loaded from the variable ``conf`` in the file ``~/.notefd.conf.py``, if it exists.

    .. attribute:: repo
       :type: notefd.repos.base.Repo

    Here's an example of how to use this class. This would print the titles of all notes under ``~/notes``
    tagged with both "journal" and "travel".

    .. code-block:: python

       import os.path
       from notefd.api import Notefd
       nf = Notefd.for_user()
       for result in nf.search(['journal', 'travel'], os.path.expanduser('~/notes')):
           if result.header:
               print(result.header.title)
    """

    @staticmethod
    def for_user() -> Notefd:
        """Creates an instance using the user's ``~/.notefd.conf.py`` file, or the defaults if it is absent.

        Raises :exc:`notefd.conf.ConfError` if the file exists but does not define configuration.
        """
        return NotefdConf.for_user().instantiate()

    def __init__(self, conf: NotefdConf):
        self.conf = conf
        self.repo = DirectRepo(conf)

    def search(self, tags: TagQueryIsh, root: str = '.') -> List[SearchResult]:
        """Finds notes at or under root whose headers have all of the given tags.

        The result contains, in path order, one entry for each matching note and one for each note that
        could not be read. Read failures never stop the search.
        """
        return list(self.repo.query(tags, root))
