"""Rendering subpackage.

Turns finished canvases into something to look at. Renderers only read the
canvas; they never draw on it.

* :mod:`skyline_art.renderer.terminal`: ANSI gray cells and braille text.
"""
