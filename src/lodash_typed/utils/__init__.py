"""Conversion utilities."""

from lodash_typed.utils.type_conv import safe_convert, to_key, to_string

__all__ = ['safe_convert', 'to_key', 'to_string']
