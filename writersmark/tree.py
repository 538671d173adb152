"""
# Writers-Mark: tree.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The compiled content tree.

Content is a sequence whose items are each one of
- raw text (`str`),
- a `Span` (the opening delimiter of its span rule, and nested content), or
- a `Link` (a url, and nested content).

For storage, the tree converts to and from plain JSON-ready data:
````
"«raw text»"
{"type": "span", "style": "«opening_delimiter»", "contents": [...]}
{"type": "link", "url": "«url»", "contents": [...]}
````
"""

from typing import Any, Optional, Union

from writersmark.exceptions import UnrecognisedContentException
from writersmark.style import Style, style_from_data


class Span:
    KIND = 'span'

    _style: str
    _contents: list['Content']

    def __init__(self, style: str, contents: Optional[list['Content']] = None):
        self._style = style
        self._contents = [] if contents is None else contents

    @property
    def style(self) -> str:
        return self._style

    @property
    def contents(self) -> list['Content']:
        return self._contents

    def to_data(self) -> dict[str, Any]:
        return {'type': self.KIND, 'style': self._style, 'contents': contents_to_data(self._contents)}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Span):
            return NotImplemented

        return self._style == other._style and self._contents == other._contents

    def __repr__(self) -> str:
        return f'Span({self._style!r}, {self._contents!r})'


class Link:
    KIND = 'link'

    _url: str
    _contents: list['Content']

    def __init__(self, url: str, contents: Optional[list['Content']] = None):
        self._url = url
        self._contents = [] if contents is None else contents

    @property
    def url(self) -> str:
        return self._url

    @property
    def contents(self) -> list['Content']:
        return self._contents

    def to_data(self) -> dict[str, Any]:
        return {'type': self.KIND, 'url': self._url, 'contents': contents_to_data(self._contents)}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Link):
            return NotImplemented

        return self._url == other._url and self._contents == other._contents

    def __repr__(self) -> str:
        return f'Link({self._url!r}, {self._contents!r})'


Content = Union[str, Span, Link]


class CompiledParagraph:
    """
    A compiled paragraph: the names of the paragraph rules applied, and the body.
    """
    _styles: list[str]
    _contents: list['Content']

    def __init__(self, styles: list[str], contents: list['Content']):
        self._styles = styles
        self._contents = contents

    @property
    def styles(self) -> list[str]:
        return self._styles

    @property
    def contents(self) -> list['Content']:
        return self._contents

    def to_data(self) -> dict[str, Any]:
        return {'styles': list(self._styles), 'contents': contents_to_data(self._contents)}

    def __eq__(self, other) -> bool:
        if not isinstance(other, CompiledParagraph):
            return NotImplemented

        return self._styles == other._styles and self._contents == other._contents

    def __repr__(self) -> str:
        return f'CompiledParagraph(styles={self._styles!r}, contents={self._contents!r})'


class CompiledText:
    """
    A compiled text: its paragraphs, and every style that contributed to it.

    The styles are kept (the edge matter style last)
    so that the text can be re-validated without the raw text.
    """
    _paragraphs: list['CompiledParagraph']
    _styles: list['Style']

    def __init__(self, paragraphs: list['CompiledParagraph'], styles: list['Style']):
        self._paragraphs = paragraphs
        self._styles = styles

    @property
    def paragraphs(self) -> list['CompiledParagraph']:
        return self._paragraphs

    @property
    def styles(self) -> list['Style']:
        return self._styles

    def to_data(self) -> dict[str, Any]:
        return {
            'paragraphs': [paragraph.to_data() for paragraph in self._paragraphs],
            'styles': [style.to_data() for style in self._styles],
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, CompiledText):
            return NotImplemented

        return self._paragraphs == other._paragraphs and self._styles == other._styles

    def __repr__(self) -> str:
        return f'CompiledText(paragraphs={self._paragraphs!r}, styles={self._styles!r})'


def contents_to_data(contents: list['Content']) -> list[Any]:
    data = []
    for item in contents:
        if isinstance(item, str):
            data.append(item)
        elif isinstance(item, (Span, Link)):
            data.append(item.to_data())
        else:
            raise UnrecognisedContentException(f'error: cannot serialise content item {item!r}')

    return data


def content_from_data(data: Any) -> 'Content':
    """
    Rebuild a content item from deserialised data.

    Anything not recognisable as a span or a link degrades to raw text.
    """
    if isinstance(data, str):
        return data

    if isinstance(data, dict):
        kind = data.get('type')
        if kind == Span.KIND:
            return Span(data.get('style'), contents_from_data(data.get('contents')))
        if kind == Link.KIND:
            return Link(data.get('url'), contents_from_data(data.get('contents')))

    return str(data)


def contents_from_data(data: Any) -> Optional[list['Content']]:
    if not isinstance(data, list):
        return None

    return [content_from_data(item) for item in data]


def compiled_paragraph_from_data(data: Any) -> Optional['CompiledParagraph']:
    if not isinstance(data, dict):
        return None

    styles = data.get('styles')
    if not isinstance(styles, list):
        styles = None

    return CompiledParagraph(styles, contents_from_data(data.get('contents')))


def compiled_text_from_data(data: Any) -> 'CompiledText':
    """
    Rebuild a compiled text from deserialised data, leniently.

    Missing or malformed parts become `None`, so that `is_text_valid(...)` refuses the result.
    """
    if not isinstance(data, dict):
        return CompiledText(None, None)

    paragraphs_data = data.get('paragraphs')
    if isinstance(paragraphs_data, list):
        paragraphs = [compiled_paragraph_from_data(paragraph_data) for paragraph_data in paragraphs_data]
    else:
        paragraphs = None

    styles_data = data.get('styles')
    if isinstance(styles_data, list):
        styles = [style_from_data(style_data) for style_data in styles_data]
    else:
        styles = None

    return CompiledText(paragraphs, styles)
