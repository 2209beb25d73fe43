"""
Code Generators for the Glue Parameter Registry.

This package contains generators that produce code from the parameter registry:
- c_header_gen: Generate the engine's C header declarations
"""

from .c_header_gen import (
    emit_c_header_stanza,
    emit_c_header_primitives,
    emit_c_header,
    generate_c_header,
)

__all__ = [
    'emit_c_header_stanza',
    'emit_c_header_primitives',
    'emit_c_header',
    'generate_c_header',
]
