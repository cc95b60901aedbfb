"""A pure-Python path tracer rendering JSON scenes to PPM, BMP, PNG, TGA or JPG files or a window."""

__version__ = "0.1.0"