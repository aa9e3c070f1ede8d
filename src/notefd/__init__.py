"""Finds notes in a directory tree by the tags in their headers.

If you installed via ``pip``, run ``notefd -h`` to get help.
Or, run ``python3 -m notefd -h``.

To use the Python API, look at :class:`notefd.api.Notefd`
"""
