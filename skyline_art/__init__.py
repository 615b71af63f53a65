"""Procedural pixel-art scenes rendered as colored terminal text.

Typical use::

    from skyline_art.sources import skyline_command

    print(skyline_command(80, 20))
"""

__version__ = "0.1.0"
