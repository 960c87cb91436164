"""Dense neural networks over 32, 16 and 8 bit float scalars, with an image-folder loader."""

__version__ = "0.1.0"