"""A small real-time strategy prototype: interpolated unit movement, box selection and a tile grid."""

__version__ = "0.1.0"