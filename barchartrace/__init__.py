"""Terminal bar chart race animations: data loading, rendering and a command line."""

__version__ = "1.0.0"
__all__ = ["animation", "cli", "strutil", "textcolor"]