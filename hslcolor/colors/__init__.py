from .hsl import HSLColor

__all__ = ["HSLColor"]
