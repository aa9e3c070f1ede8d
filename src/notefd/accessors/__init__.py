"""Support for reading note files.

:class:`notefd.accessors.base.Accessor` is the API for reading the header of a single file.
:class:`notefd.accessors.note.NoteAccessor` implements it for plain-text notes with bracketed tag lists.
"""
