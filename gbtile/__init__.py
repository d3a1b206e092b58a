"""gbtile: Game Boy 2bpp tile generator."""

__version__ = '0.1.0'
