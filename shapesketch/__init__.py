"""Interactive sketching of dots, lines, rectangles, circles and arcs on a ground plane."""

__version__ = "0.1.0"
__all__ = ["__version__"]