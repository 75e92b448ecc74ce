"""Encoder and decoder for Azam Codec, a sortable multi-section base16 encoding."""

__version__ = "0.1.5"
__all__ = ["decode", "encode", "uints"]