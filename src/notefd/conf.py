from __future__ import annotations
from dataclasses import dataclass
import os.path
from typing import Callable

from notefd.accessors.note import DEFAULT_MAX_HEADER_LINES


DEFAULT_REPORT_TEMPLATE = """\
@ ${header.path}
  >${'' if header.title is None else ' ' + header.title}
  [ ${' '.join(sorted(header.tags))} ]
"""


class ConfError(Exception):
    """Raised when the user's config file exists but does not define usable configuration, or the configuration is invalid."""


def default_ignore(parentpath: str, filename: str) -> bool:
    return False


def default_is_note(filename: str) -> bool:
    """Returns True if ``note`` is one of the dot-separated parts of the filename, ignoring case.

    For example, ``foo.note.md``, ``NOTE.txt`` and ``x.y.note`` are notes, but ``notebook.txt`` and
    ``notes.md`` are not.
    """
    return 'note' in filename.lower().split('.')


@dataclass
class NotefdConf:
    max_header_lines: int = DEFAULT_MAX_HEADER_LINES
    """How many lines at the start of each note may contain the header.

    Lines after this are never read, even if no tag list has been found yet.
    """

    ignore: Callable[[str, str], bool] = default_ignore
    """Use this to indicate files or folders that should not be scanned at all.

    The first argument is the path to the directory containing the file/folder, and the second argument is
    the filename. If this function returns True, neither that path nor any of its child paths will be
    examined.

    The default ignores nothing. To skip hidden folders like ``.git``, you could use:

    .. code-block:: python

       conf.ignore = lambda parent, name: name.startswith('.')
    """

    is_note: Callable[[str], bool] = default_is_note
    """Decides, from its filename alone, whether a file should be treated as a note.

    The default is :func:`default_is_note`.
    """

    report_template: str = DEFAULT_REPORT_TEMPLATE
    """Mako template used by the CLI to print each matching note.

    The template receives a variable ``header``, which is a :class:`notefd.models.Header`. The default
    produces output like:

    .. code-block:: text

       @ ./a.note.txt
         > My Title
         [ urgent work ]
    """

    @classmethod
    def for_user(cls) -> NotefdConf:
        """Loads the variable ``conf`` from ``~/.notefd.conf.py``, or returns defaults if the file does not exist.

        Raises :exc:`ConfError` if the file exists but does not assign an instance of this class to ``conf``.
        """
        path = os.path.expanduser(os.path.join('~', '.notefd.conf.py'))
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise ConfError('You need to assign an instance of NotefdConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self) -> NotefdConf:
        if self.max_header_lines < 1:
            raise ConfError('`max_header_lines` must be at least 1 in NotefdConf.')
        return self

    def instantiate(self):
        from notefd.api import Notefd
        return Notefd(self.standardize())
