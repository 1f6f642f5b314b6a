"""Float32 circular buffers and FIR filtering over them."""

__version__ = "0.1.0"
__all__ = ["buffer", "filter"]