"""
# Writers-Mark: style.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Style records, the style sheet compiler, and the style lookup table.

Style sheets are parsed as a sequence of blocks
````
para «name» { «properties» }
span «opening_delimiter» [«closing_delimiter»] { «properties» }
cont { «properties» }
````
where `p` and `s` may be written for `para` and `span`,
and «properties» are zero or more `«key»: «value»;` pairs.
`//` starts a comment running to the end of the line.

Parsing never fails:
- anything between recognised blocks is skipped;
- a property lacking its terminating semicolon is dropped;
- a block whose body contains an opening brace is dropped, and scanning resumes inside its body;
- a block lacking its closing brace is dropped, along with the rest of the style sheet.
"""

import copy
import re
from typing import Any, Iterable, Optional

from writersmark.sanitiser import allow_value
from writersmark.trie import Trie
from writersmark.whitelist import CompiledWhitelist, Whitelist


class StyleRule:
    """
    A mapping from property name to (sanitised) value.
    """
    _props: dict[str, str]

    def __init__(self, props: Optional[dict[str, str]] = None):
        self._props = {} if props is None else props

    @property
    def props(self) -> dict[str, str]:
        return self._props

    def extended(self, other: 'StyleRule') -> 'StyleRule':
        """
        Return a new rule with the properties of `other` laid over those of this rule.
        """
        return StyleRule({**self._props, **other.props})

    def to_data(self) -> dict[str, Any]:
        return {'props': copy.copy(self._props)}

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return self._props == other._props

    def __repr__(self) -> str:
        return f'StyleRule({self._props!r})'


class SpanStyleRule(StyleRule):
    """
    A style rule for spans, with an optional explicit closing delimiter.

    If `end_pattern` is None, the opening delimiter also closes the span.
    """
    _end_pattern: Optional[str]

    def __init__(self, props: Optional[dict[str, str]] = None, end_pattern: Optional[str] = None):
        super().__init__(props)
        self._end_pattern = end_pattern

    @property
    def end_pattern(self) -> Optional[str]:
        return self._end_pattern

    def extended(self, other: 'StyleRule') -> 'SpanStyleRule':
        """
        Return a new rule with the properties of `other` laid over those of this rule.

        The closing delimiter of this rule is kept.
        """
        return SpanStyleRule({**self._props, **other.props}, self._end_pattern)

    def to_data(self) -> dict[str, Any]:
        data = super().to_data()
        if self._end_pattern is not None:
            data['endPattern'] = self._end_pattern

        return data

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return self._props == other._props and self._end_pattern == other._end_pattern

    def __repr__(self) -> str:
        return f'SpanStyleRule({self._props!r}, end_pattern={self._end_pattern!r})'


class Style:
    """
    A compiled style, consisting of three independent rule namespaces:
    - `paragraph`: paragraph rules by name;
    - `span`: span rules by opening delimiter;
    - `container`: the single unnamed container rule, if any.
    """
    _paragraph: dict[str, 'StyleRule']
    _span: dict[str, 'SpanStyleRule']
    _container: Optional['StyleRule']

    def __init__(self, paragraph: dict[str, 'StyleRule'], span: dict[str, 'SpanStyleRule'],
                 container: Optional['StyleRule'] = None):
        self._paragraph = paragraph
        self._span = span
        self._container = container

    @property
    def paragraph(self) -> dict[str, 'StyleRule']:
        return self._paragraph

    @property
    def span(self) -> dict[str, 'SpanStyleRule']:
        return self._span

    @property
    def container(self) -> Optional['StyleRule']:
        return self._container

    def to_data(self) -> dict[str, Any]:
        data = {
            'para': {name: rule.to_data() for name, rule in self._paragraph.items()},
            'span': {name: rule.to_data() for name, rule in self._span.items()},
        }
        if self._container is not None:
            data['cont'] = self._container.to_data()

        return data

    def __eq__(self, other) -> bool:
        if not isinstance(other, Style):
            return NotImplemented

        return (
            self._paragraph == other._paragraph
            and self._span == other._span
            and self._container == other._container
        )

    def __repr__(self) -> str:
        return f'Style(paragraph={self._paragraph!r}, span={self._span!r}, container={self._container!r})'


def style_rule_from_data(data: Any) -> Any:
    """
    Rebuild a style rule from deserialised data.

    Data of the wrong shape is returned as is (or with `None` for missing fields),
    for the validators to refuse.
    """
    if not isinstance(data, dict):
        return data

    return StyleRule(data.get('props'))


def span_style_rule_from_data(data: Any) -> Any:
    if not isinstance(data, dict):
        return data

    return SpanStyleRule(data.get('props'), data.get('endPattern'))


def style_from_data(data: Any) -> 'Style':
    """
    Rebuild a style from deserialised data, leniently.

    Missing namespaces become `None`, so that `is_style_valid(...)` refuses the result.
    """
    if not isinstance(data, dict):
        return Style(None, None)

    paragraph_data = data.get('para')
    if isinstance(paragraph_data, dict):
        paragraph = {name: style_rule_from_data(rule_data) for name, rule_data in paragraph_data.items()}
    else:
        paragraph = paragraph_data

    span_data = data.get('span')
    if isinstance(span_data, dict):
        span = {name: span_style_rule_from_data(rule_data) for name, rule_data in span_data.items()}
    else:
        span = span_data

    container_data = data.get('cont')
    if container_data is None:
        container = None
    else:
        container = style_rule_from_data(container_data)

    return Style(paragraph, span, container)


_COMMENT_PATTERN_COMPILED = re.compile(pattern=r'//[^\n]*')
_BLOCK_HEADER_PATTERN_COMPILED = re.compile(
    pattern=r'''
        \b
        (?:
            (?: para | p ) [\s]+ (?P<paragraph_name> [^{}\s]+ )
                |
            (?: span | s ) [\s]+ (?P<span_name> [^{}\s]+ ) (?: [\s]+ (?P<span_end_pattern> [^{}\s]+ ) )?
                |
            (?P<container_keyword> cont )
        )
        [\s]*
        [{]
    ''',
    flags=re.ASCII | re.VERBOSE,
)
_PROPERTY_PATTERN_COMPILED = re.compile(
    pattern=r'''
        (?P<key> [A-Za-z0-9_-]+ ) [\s]*
        [:]
        (?P<value> [^;:]* )
        [;]
    ''',
    flags=re.ASCII | re.VERBOSE,
)


def parse_rule_props(body: str, whitelist: 'Whitelist') -> dict[str, str]:
    """
    Extract the permitted properties from the body of a block.

    A property is kept only if its key is whitelisted and its value passes `allow_value(...)`.
    Where a key is repeated, the latest permitted value prevails.
    """
    props = {}

    for property_match in _PROPERTY_PATTERN_COMPILED.finditer(body):
        key = property_match.group('key')
        value = property_match.group('value').strip()
        if whitelist.allows(key) and allow_value(value):
            props[key] = value

    return props


def compile_style(style_sheet: str, whitelist: 'CompiledWhitelist') -> 'Style':
    """
    Compile a style sheet into a style.

    No default paragraph rule is added; callers requiring one must supply it.
    """
    paragraph: dict[str, 'StyleRule'] = {}
    span: dict[str, 'SpanStyleRule'] = {}
    container: Optional['StyleRule'] = None

    style_sheet = _COMMENT_PATTERN_COMPILED.sub('', style_sheet)
    position = 0

    while True:
        header_match = _BLOCK_HEADER_PATTERN_COMPILED.search(style_sheet, position)
        if header_match is None:
            break

        body_start = header_match.end()
        body_end = style_sheet.find('}', body_start)
        if body_end == -1:
            break

        nested_brace_index = style_sheet.find('{', body_start, body_end)
        if nested_brace_index != -1:
            position = body_start
            continue

        body = style_sheet[body_start:body_end]
        position = body_end + 1

        paragraph_name = header_match.group('paragraph_name')
        if paragraph_name is not None:
            paragraph[paragraph_name] = StyleRule(parse_rule_props(body, whitelist.para))
            continue

        span_name = header_match.group('span_name')
        if span_name is not None:
            span_end_pattern = header_match.group('span_end_pattern')
            span[span_name] = SpanStyleRule(parse_rule_props(body, whitelist.span), span_end_pattern)
            continue

        container = StyleRule(parse_rule_props(body, whitelist.cont))

    return Style(paragraph, span, container)


def combine_styles(styles: Iterable['Style']) -> 'Style':
    """
    Merge styles from left to right into a new style.

    A rule already present is extended by a later rule of the same name
    (later property values overriding earlier ones);
    a rule not yet present is adopted as a copy.
    None of the given styles is altered.
    """
    paragraph: dict[str, 'StyleRule'] = {}
    span: dict[str, 'SpanStyleRule'] = {}
    container: Optional['StyleRule'] = None

    for style in styles:
        for name, rule in style.paragraph.items():
            existing_rule = paragraph.get(name)
            if existing_rule is None:
                paragraph[name] = StyleRule(copy.copy(rule.props))
            else:
                paragraph[name] = existing_rule.extended(rule)

        for name, rule in style.span.items():
            existing_rule = span.get(name)
            if existing_rule is None:
                span[name] = SpanStyleRule(copy.copy(rule.props), rule.end_pattern)
            else:
                span[name] = existing_rule.extended(rule)

        if style.container is not None:
            if container is None:
                container = StyleRule(copy.copy(style.container.props))
            else:
                container = container.extended(style.container)

    return Style(paragraph, span, container)


class StyleLookupTable:
    """
    Fast queries over the rules of several styles, built once per text compilation.

    - `paragraph_names`: every paragraph rule name of every style.
    - `end_pattern_from_opening`: the closing delimiter of every span rule, by opening delimiter.
      On collision, the later style prevails.
    - `opening_trie`: a trie over every opening delimiter.
    """
    _paragraph_names: set[str]
    _end_pattern_from_opening: dict[str, str]
    _opening_trie: 'Trie'

    def __init__(self, styles: Iterable['Style']):
        self._paragraph_names = set()
        self._end_pattern_from_opening = {}

        for style in styles:
            self._paragraph_names.update(style.paragraph.keys())

            for opening, rule in style.span.items():
                end_pattern = rule.end_pattern
                self._end_pattern_from_opening[opening] = opening if end_pattern is None else end_pattern

        self._opening_trie = Trie(self._end_pattern_from_opening.keys())

    @property
    def paragraph_names(self) -> set[str]:
        return self._paragraph_names

    @property
    def end_pattern_from_opening(self) -> dict[str, str]:
        return self._end_pattern_from_opening

    @property
    def opening_trie(self) -> 'Trie':
        return self._opening_trie

    def has_paragraph_rule(self, name: str) -> bool:
        return name in self._paragraph_names
