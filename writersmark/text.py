"""
# Writers-Mark: text.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Text precompilation and compilation.

Texts are parsed as
````
[---
«front_matter»
---]
«paragraphs»
[---
«back_matter»
---]
````
where the front matter delimiters must be the very first line,
and the back matter delimiters must be the very last line.
Front and back matter together make up the edge matter, an embedded style sheet.
Paragraphs are runs of non-blank lines separated by blank lines.
"""

from typing import NamedTuple

from writersmark.constants import EDGE_MATTER_DELIMITER, LINKS_ENABLED_DEFAULT
from writersmark.spans import resolve_contents
from writersmark.style import Style, StyleLookupTable, compile_style
from writersmark.tree import CompiledParagraph, CompiledText
from writersmark.utilities import print_verbose_comparison, trim_blank_lines
from writersmark.whitelist import CompiledWhitelist


class EdgeMatterExtraction(NamedTuple):
    edge_matter_lines: list[str]
    remaining_lines: list[str]


class PrecompiledText(NamedTuple):
    edge_matter: str
    paragraphs: list[list[str]]


def extract_edge_matter(lines: list[str]) -> 'EdgeMatterExtraction':
    """
    Separate front matter and back matter from the remaining lines.

    Front matter is recognised only if the first line is the delimiter
    and a later line is also the delimiter.
    Back matter is recognised only if the last line is the delimiter
    and an earlier line (after any front matter) is also the delimiter.
    Lone delimiters are left alone, as ordinary text.
    The given list is not altered.
    """
    edge_matter_lines: list[str] = []
    remaining_lines = list(lines)

    if len(remaining_lines) < 2:
        return EdgeMatterExtraction(edge_matter_lines, remaining_lines)

    if remaining_lines[0] == EDGE_MATTER_DELIMITER:
        try:
            front_matter_end = remaining_lines.index(EDGE_MATTER_DELIMITER, 1)
        except ValueError:
            pass
        else:
            edge_matter_lines.extend(remaining_lines[1:front_matter_end])
            remaining_lines = remaining_lines[front_matter_end + 1:]

    if len(remaining_lines) > 1 and remaining_lines[-1] == EDGE_MATTER_DELIMITER:
        for back_matter_start in range(len(remaining_lines) - 2, -1, -1):
            if remaining_lines[back_matter_start] == EDGE_MATTER_DELIMITER:
                edge_matter_lines.extend(remaining_lines[back_matter_start + 1:-1])
                remaining_lines = remaining_lines[:back_matter_start]
                break

    return EdgeMatterExtraction(edge_matter_lines, remaining_lines)


def split_paragraphs(lines: list[str]) -> list[list[str]]:
    """
    Group lines into paragraphs, separated by runs of one or more blank lines.
    """
    paragraphs = []
    paragraph: list[str] = []

    for line in lines:
        if line == '':
            if len(paragraph) > 0:
                paragraphs.append(paragraph)
                paragraph = []
        else:
            paragraph.append(line)

    if len(paragraph) > 0:
        paragraphs.append(paragraph)

    return paragraphs


def precompile(text: str) -> 'PrecompiledText':
    """
    Split raw text into edge matter and paragraphs of trimmed, non-blank lines.
    """
    lines = [line.strip() for line in text.split('\n')]

    edge_matter_lines, lines = extract_edge_matter(lines)
    lines = trim_blank_lines(lines)

    return PrecompiledText('\n'.join(edge_matter_lines), split_paragraphs(lines))


def compile_edge_matter(edge_matter: str, whitelist: 'CompiledWhitelist') -> 'Style':
    return compile_style(edge_matter, whitelist)


def compile_paragraph(lines: list[str], lookup_table: 'StyleLookupTable',
                      links_enabled: bool = LINKS_ENABLED_DEFAULT) -> 'CompiledParagraph':
    """
    Compile the lines of a paragraph.

    Leading lines that are exactly the name of a paragraph rule select that rule;
    the first line that is not stops the selection.
    The rest of the lines are joined with single spaces and resolved into content.
    """
    styles = []
    line_index = 0

    while line_index < len(lines) and lookup_table.has_paragraph_rule(lines[line_index]):
        styles.append(lines[line_index])
        line_index += 1

    text = ' '.join(lines[line_index:])
    contents = resolve_contents(text, lookup_table, links_enabled)

    return CompiledParagraph(styles, contents)


def compile_text(text: str, styles: list['Style'], whitelist: 'CompiledWhitelist',
                 links_enabled: bool = LINKS_ENABLED_DEFAULT, verbose_mode_enabled: bool = False) -> 'CompiledText':
    """
    Compile raw text against the given styles and the style in its own edge matter.

    The edge matter style is appended after the given styles,
    and so prevails over them on conflicting span rules.
    In verbose mode, every paragraph is printed before and after compilation.
    """
    precompiled_text = precompile(text)
    edge_matter_style = compile_edge_matter(precompiled_text.edge_matter, whitelist)

    contributing_styles = [*styles, edge_matter_style]
    lookup_table = StyleLookupTable(contributing_styles)
    paragraphs = []

    for paragraph_number, paragraph_lines in enumerate(precompiled_text.paragraphs, start=1):
        paragraph = compile_paragraph(paragraph_lines, lookup_table, links_enabled)
        paragraphs.append(paragraph)

        if verbose_mode_enabled:
            print_verbose_comparison(f'paragraph {paragraph_number}', '\n'.join(paragraph_lines), repr(paragraph))

    return CompiledText(paragraphs, contributing_styles)
