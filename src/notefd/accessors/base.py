"""Defines the API for reading the header of an individual file.

The most important class is :class:`Accessor`.
"""

from notefd.models import Header


class ReadError(Exception):
    """Raised when an :class:`Accessor` is unable to read a file."""
    def __init__(self, path: str, cause: BaseException = None):
        self.message = f'Failed to read file: {path}'
        self.path = path
        self.cause = cause
        super().__init__(self.message)


class Accessor:
    """Base class for accessors, which are responsible for reading headers from supported file types.

    Each instance is for working with a single file, specified to the constructor.

    .. attribute:: path
       :type: str
    """
    def __init__(self, path: str):
        self.path = path
        self._loaded = False

    def load(self) -> None:
        """Attempts to read the file. This does not normally need to be called explicitly.

        It will be called by :meth:`info` when necessary.

        May raise :exc:`ReadError`.
        """
        try:
            self._load()
        except Exception as e:
            self._loaded = False
            raise e
        self._loaded = True

    def info(self) -> Header:
        """Returns the header of the file.

        This will not reload the file from disk if the instance has previously loaded it.

        May raise :exc:`ReadError`.
        """
        if not self._loaded:
            self.load()
        return self._info()

    def _load(self) -> None:
        """Subclasses should override this instead of :meth:`load`.

        The base class will then track whether load has been called, so that calls to :meth:`info`
        do not result in multiple loads."""
        raise NotImplementedError()

    def _info(self) -> Header:
        """Subclasses should override this instead of :meth:`info`.

        The base class will ensure :meth:`load` has been called.
        """
        raise NotImplementedError()
