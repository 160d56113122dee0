"""Real-to-real DST/DCT transforms, line-wise grid application, and solver buffers."""

__version__ = "0.1.0"
__all__ = ["dct", "dst", "errors", "lines", "options", "shape", "workspace"]