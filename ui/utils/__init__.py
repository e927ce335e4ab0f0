"""UI utility functions."""

from .input_parsing import parse_pack_size_input, ParsedPackSizes

__all__ = ['parse_pack_size_input', 'ParsedPackSizes']
