"""Average per-point measurement files and draw them as SVG circle scenes."""

__version__ = "0.1.0"
__all__ = ["__version__"]