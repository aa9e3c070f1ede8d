"""Handles interaction with a directory tree of notes.

:class:`notefd.repos.base.Repo` defines an API.
:class:`notefd.repos.direct.DirectRepo` reads notes directly from the filesystem.
"""
