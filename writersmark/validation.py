"""
# Writers-Mark: validation.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Validation of styles and compiled texts that have crossed a trust boundary.

A style or compiled text loaded from storage may have been tampered with,
or may have been compiled against a whitelist since tightened.
Validation therefore re-checks every property name against the whitelist
and every property value against the sanitiser, and never trusts the compiler to have done so.
Validation never raises and never alters its argument.
"""

from typing import Any

from writersmark.constants import DEFAULT_PARAGRAPH_RULE_NAME
from writersmark.sanitiser import allow_value
from writersmark.style import SpanStyleRule, Style, StyleRule
from writersmark.tree import CompiledParagraph, CompiledText
from writersmark.whitelist import CompiledWhitelist, Whitelist


def is_rule_valid(rule: Any, whitelist: 'Whitelist') -> bool:
    if not isinstance(rule, StyleRule):
        return False

    props = rule.props
    if not isinstance(props, dict):
        return False

    for name, value in props.items():
        if not whitelist.allows(name) or not allow_value(value):
            return False

    return True


def is_style_valid(style: Any, whitelist: 'CompiledWhitelist') -> bool:
    """
    Whether a style is structurally sound and permitted by the whitelist.

    Both the paragraph and span namespaces must be present;
    the container rule is optional.
    """
    if not isinstance(style, Style):
        return False

    paragraph = style.paragraph
    span = style.span
    if not isinstance(paragraph, dict) or not isinstance(span, dict):
        return False

    for name, rule in paragraph.items():
        if not isinstance(name, str) or not is_rule_valid(rule, whitelist.para):
            return False

    for opening, rule in span.items():
        if not isinstance(opening, str) or not isinstance(rule, SpanStyleRule):
            return False
        if rule.end_pattern is not None and not isinstance(rule.end_pattern, str):
            return False
        if not is_rule_valid(rule, whitelist.span):
            return False

    container = style.container
    if container is not None and not is_rule_valid(container, whitelist.cont):
        return False

    return True


def is_style_complete(style: Any, whitelist: 'CompiledWhitelist',
                      default_paragraph_rule_name: str = DEFAULT_PARAGRAPH_RULE_NAME) -> bool:
    """
    Whether a style is valid and also provides the default paragraph rule.

    This is the stricter check for a style used on its own.
    """
    if not is_style_valid(style, whitelist):
        return False

    return default_paragraph_rule_name in style.paragraph


def is_paragraph_valid(paragraph: Any) -> bool:
    if not isinstance(paragraph, CompiledParagraph):
        return False

    return isinstance(paragraph.styles, list) and isinstance(paragraph.contents, list)


def is_text_valid(text: Any, whitelist: 'CompiledWhitelist') -> bool:
    """
    Whether a compiled text is structurally sound and its styles are permitted by the whitelist.

    Each contributing style is checked with `is_style_valid(...)`;
    an edge matter style is a partial overlay, and need not provide the default paragraph rule.
    Content is not checked: raw text is never interpreted as markup,
    so at worst malformed content renders as literal text.
    """
    if not isinstance(text, CompiledText):
        return False

    styles = text.styles
    paragraphs = text.paragraphs
    if not isinstance(styles, list) or not isinstance(paragraphs, list):
        return False

    for style in styles:
        if not is_style_valid(style, whitelist):
            return False

    for paragraph in paragraphs:
        if not is_paragraph_valid(paragraph):
            return False

    return True
