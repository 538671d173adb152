"""
# Writers-Mark: spans.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Resolution of links and span delimiters into a content tree.

Links are of the form
````
[«url»](«content»)
````
where «url» runs to the nearest following `]`, which must be followed immediately by `(`,
and «content» runs to the nearest following `)`.

Span delimiters are resolved as follows:
- among opening delimiters beginning at the same position, the longest is tried first;
- among opening delimiters beginning at different positions, the leftmost is tried first;
- an opening delimiter without a reachable closing delimiter is left as literal text;
- a closing delimiter immediately following its opening delimiter does not count
  (there are no empty spans), and the search for a closing delimiter carries on past it.

Resolution is driven by an explicit stack of pending work units rather than by recursion,
so that deeply nested input cannot exhaust the call stack.
"""

import re
import warnings
from typing import NamedTuple, Optional

from writersmark.constants import MAX_NESTING_DEPTH
from writersmark.style import StyleLookupTable
from writersmark.tree import Content, Link, Span

_LINK_PATTERN_COMPILED = re.compile(
    pattern=r'''
        \[ (?P<url> [^\]]* ) \]
        \( (?P<content> [^)]* ) \)
    ''',
    flags=re.VERBOSE,
)


def extract_links(text: str) -> list['Content']:
    """
    Split text into raw text and links.

    The content of each link is left unresolved, as a single piece of raw text (if non-empty).
    """
    fragments: list['Content'] = []
    position = 0

    for link_match in _LINK_PATTERN_COMPILED.finditer(text):
        before = text[position:link_match.start()]
        if len(before) > 0:
            fragments.append(before)

        content = link_match.group('content')
        fragments.append(Link(link_match.group('url'), [content] if len(content) > 0 else []))
        position = link_match.end()

    after = text[position:]
    if len(after) > 0:
        fragments.append(after)

    return fragments


class WorkUnit(NamedTuple):
    target: list['Content']
    fragments: list['Content']
    depth: int


class SpanMatch(NamedTuple):
    opening: str
    end_pattern: str
    opening_index: int
    closing_fragment_index: int
    closing_index: int


def find_closing(fragments: list['Content'], fragment_index: int, content_start: int,
                 end_pattern: str) -> Optional[tuple[int, int]]:
    """
    Find the first admissible occurrence of `end_pattern` after `content_start`.

    The search begins in the fragment at `fragment_index` and carries on through later text fragments,
    passing over links. Returns (fragment index, index within fragment), or None.
    """
    fragment = fragments[fragment_index]

    closing_index = fragment.find(end_pattern, content_start)
    if closing_index == content_start:
        closing_index = fragment.find(end_pattern, content_start + len(end_pattern))
    if closing_index != -1:
        return fragment_index, closing_index

    for later_fragment_index in range(fragment_index + 1, len(fragments)):
        later_fragment = fragments[later_fragment_index]
        if not isinstance(later_fragment, str):
            continue

        closing_index = later_fragment.find(end_pattern)
        if closing_index != -1:
            return later_fragment_index, closing_index

    return None


def find_span(fragments: list['Content'], fragment_index: int,
              lookup_table: 'StyleLookupTable') -> Optional['SpanMatch']:
    """
    Find the first span opening in the fragment at `fragment_index` that can be closed.
    """
    fragment = fragments[fragment_index]
    opening_trie = lookup_table.opening_trie
    end_pattern_from_opening = lookup_table.end_pattern_from_opening
    search_start = 0

    while True:
        trie_match = opening_trie.first_match(fragment, search_start)
        if trie_match.index == -1:
            return None

        for opening in trie_match.patterns:
            end_pattern = end_pattern_from_opening[opening]
            closing = find_closing(fragments, fragment_index, trie_match.index + len(opening), end_pattern)
            if closing is not None:
                closing_fragment_index, closing_index = closing
                return SpanMatch(opening, end_pattern, trie_match.index, closing_fragment_index, closing_index)

        search_start = trie_match.index + 1


def slice_fragments(fragments: list['Content'],
                    start_fragment_index: int, start_index: int,
                    end_fragment_index: int, end_index: int) -> list['Content']:
    if start_fragment_index == end_fragment_index:
        sliced = [fragments[start_fragment_index][start_index:end_index]]
    else:
        sliced = [
            fragments[start_fragment_index][start_index:],
            *fragments[start_fragment_index + 1:end_fragment_index],
            fragments[end_fragment_index][:end_index],
        ]

    return [fragment for fragment in sliced if fragment != '']


def append_literally(target: list['Content'], fragments: list['Content']):
    for fragment in fragments:
        if isinstance(fragment, Link):
            target.append(Link(fragment.url, list(fragment.contents)))
        else:
            target.append(fragment)


def resolve_work_unit(work_unit: 'WorkUnit', lookup_table: 'StyleLookupTable', pending: list['WorkUnit']):
    """
    Append the resolved fragments of a work unit to its target, up to and including the first span found.

    The content of that span, and everything after it, are pushed onto `pending` as further work units.
    """
    target, fragments, depth = work_unit

    for fragment_index, fragment in enumerate(fragments):
        if isinstance(fragment, Link):
            link = Link(fragment.url)
            target.append(link)
            pending.append(WorkUnit(link.contents, fragment.contents, depth + 1))
            continue

        if not isinstance(fragment, str):
            target.append(fragment)
            continue

        span_match = find_span(fragments, fragment_index, lookup_table)
        if span_match is None:
            target.append(fragment)
            continue

        before = fragment[:span_match.opening_index]
        if len(before) > 0:
            target.append(before)

        span = Span(span_match.opening)
        target.append(span)

        content_fragments = slice_fragments(
            fragments,
            fragment_index, span_match.opening_index + len(span_match.opening),
            span_match.closing_fragment_index, span_match.closing_index,
        )
        pending.append(WorkUnit(span.contents, content_fragments, depth + 1))

        closing_fragment = fragments[span_match.closing_fragment_index]
        after = closing_fragment[span_match.closing_index + len(span_match.end_pattern):]
        after_fragments = [
            remaining_fragment
            for remaining_fragment in [after, *fragments[span_match.closing_fragment_index + 1:]]
            if remaining_fragment != ''
        ]
        if len(after_fragments) > 0:
            pending.append(WorkUnit(target, after_fragments, depth))

        return


def apply_span_rules(fragments: list['Content'], lookup_table: 'StyleLookupTable',
                     max_depth: int = MAX_NESTING_DEPTH) -> list['Content']:
    """
    Resolve span delimiters over a sequence of raw text and link fragments.

    Link content is resolved too. Beyond `max_depth` levels of nesting,
    fragments are kept as literal text and a warning is issued.
    """
    result: list['Content'] = []
    pending = [WorkUnit(result, fragments, 0)]
    depth_exceeded = False

    while len(pending) > 0:
        work_unit = pending.pop()

        if work_unit.depth >= max_depth:
            append_literally(work_unit.target, work_unit.fragments)
            depth_exceeded = True
            continue

        resolve_work_unit(work_unit, lookup_table, pending)

    if depth_exceeded:
        warnings.warn(
            f'warning: nesting deeper than {max_depth} levels; '
            f'content beyond that depth has been kept as literal text'
        )

    return result


def resolve_contents(text: str, lookup_table: 'StyleLookupTable', links_enabled: bool) -> list['Content']:
    """
    Resolve the joined text of a paragraph into content.
    """
    if links_enabled:
        fragments = extract_links(text)
    elif len(text) > 0:
        fragments = [text]
    else:
        fragments = []

    return apply_span_rules(fragments, lookup_table)
