"""Gap tracker backend - process gap similarity detection"""

__version__ = "1.0.0"
