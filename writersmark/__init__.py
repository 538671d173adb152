"""
# Writers-Mark

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Compile formatted text and style sheets from untrusted users
into a validated content tree, safe to store and to render.
"""

from writersmark._version import __version__
from writersmark.core import Context
from writersmark.style import Style, compile_style, style_from_data
from writersmark.text import compile_text
from writersmark.tree import CompiledText, Link, Span, compiled_text_from_data
from writersmark.validation import is_style_complete, is_style_valid, is_text_valid
from writersmark.whitelist import CompiledWhitelist, compile_whitelist

__all__ = [
    '__version__',
    'CompiledText',
    'CompiledWhitelist',
    'Context',
    'Link',
    'Span',
    'Style',
    'compile_style',
    'compile_text',
    'compile_whitelist',
    'compiled_text_from_data',
    'is_style_complete',
    'is_style_valid',
    'is_text_valid',
    'style_from_data',
]
