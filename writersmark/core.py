"""
# Writers-Mark: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The user-facing entry point.

A `Context` bundles a compiled whitelist with compilation options,
and forwards to the style compiler, the text compiler, and the validators.
"""

from typing import Iterable, Mapping, Optional

from writersmark.constants import DEFAULT_PARAGRAPH_RULE_NAME, DEFAULT_WHITELIST_PATTERNS, LINKS_ENABLED_DEFAULT
from writersmark.style import Style, StyleRule, combine_styles, compile_style
from writersmark.text import compile_text
from writersmark.tree import CompiledText
from writersmark.validation import is_style_complete, is_text_valid
from writersmark.whitelist import CompiledWhitelist, compile_whitelist


class Context:
    """
    Compilation context.

    If `whitelist_patterns` is None, `DEFAULT_WHITELIST_PATTERNS` shall be used.
    Otherwise it must provide patterns for each of `para`, `span`, and `cont`.
    """
    _whitelist: 'CompiledWhitelist'
    _links_enabled: bool
    _default_paragraph_rule_name: str
    _verbose_mode_enabled: bool

    def __init__(self, whitelist_patterns: Optional[Mapping[str, Iterable[str]]] = None,
                 links_enabled: bool = LINKS_ENABLED_DEFAULT,
                 default_paragraph_rule_name: str = DEFAULT_PARAGRAPH_RULE_NAME,
                 verbose_mode_enabled: bool = False):
        if whitelist_patterns is None:
            whitelist_patterns = DEFAULT_WHITELIST_PATTERNS

        self._whitelist = compile_whitelist(whitelist_patterns)
        self._links_enabled = links_enabled
        self._default_paragraph_rule_name = default_paragraph_rule_name
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def whitelist(self) -> 'CompiledWhitelist':
        return self._whitelist

    @property
    def links_enabled(self) -> bool:
        return self._links_enabled

    def compile_style(self, style_sheet: str) -> 'Style':
        """
        Compile a style sheet, ready to be passed to `compile_text(...)`.

        The result always provides the default paragraph rule (empty unless the style sheet sets it).
        """
        default_style = Style({self._default_paragraph_rule_name: StyleRule()}, {})
        return combine_styles([default_style, compile_style(style_sheet, self._whitelist)])

    def compile_text(self, text: str, styles: list['Style']) -> 'CompiledText':
        return compile_text(text, styles, self._whitelist, self._links_enabled, self._verbose_mode_enabled)

    def is_style_valid(self, style: 'Style') -> bool:
        """
        Whether a style (say, just deserialised) is safe to use on its own.
        """
        return is_style_complete(style, self._whitelist, self._default_paragraph_rule_name)

    def is_text_valid(self, text: 'CompiledText') -> bool:
        """
        Whether a compiled text (say, just deserialised) is safe to use.
        """
        return is_text_valid(text, self._whitelist)
