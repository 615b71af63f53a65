"""Procedural scenes.

Each scene draws onto a :class:`~skyline_art.canvas.Canvas` using the canvas
and rasterizer primitives and a caller-supplied random source:

* :mod:`skyline_art.scenes.skyline`: layered 8 bit city skyline.
* :mod:`skyline_art.scenes.schotter`: grid of increasingly disordered squares.
"""
