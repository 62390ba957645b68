"""Core helpers shared by the data, domain and service layers."""

from .byteio import read_u16, read_u24, write_u16, write_u24
from .types import Endian

__all__ = ["Endian", "read_u16", "read_u24", "write_u16", "write_u24"]
