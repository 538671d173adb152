"""
# Writers-Mark: whitelist.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Allow-lists of style property names.
"""

from typing import Iterable, Mapping, NamedTuple

from writersmark.exceptions import MalformedWhitelistException
from writersmark.trie import Trie

WILDCARD = '*'
WHITELIST_NAMESPACES = ('para', 'span', 'cont')


class Whitelist:
    """
    Allow-list of property names.

    A pattern `«name»` permits exactly `«name»`.
    A pattern `«prefix»*` permits `«prefix»` and anything beginning with `«prefix»`.
    For example, `margin*` permits `margin`, `margin-left`, and `margin-top`.
    """
    _trie: 'Trie'

    def __init__(self, patterns: Iterable[str]):
        exact_patterns = []
        prefix_patterns = []

        for pattern in patterns:
            if pattern.endswith(WILDCARD):
                prefix_patterns.append(pattern[:-len(WILDCARD)])
            else:
                exact_patterns.append(pattern)

        self._trie = Trie(exact_patterns, prefix_patterns)

    def allows(self, name: str) -> bool:
        if not isinstance(name, str):
            return False

        return self._trie.accepts(name)


class CompiledWhitelist(NamedTuple):
    para: Whitelist
    span: Whitelist
    cont: Whitelist


def compile_whitelist(patterns_from_namespace: Mapping[str, Iterable[str]]) -> CompiledWhitelist:
    """
    Compile raw whitelist patterns for each of `para`, `span`, and `cont` rules.
    """
    for namespace in WHITELIST_NAMESPACES:
        if namespace not in patterns_from_namespace:
            raise MalformedWhitelistException(namespace)

    return CompiledWhitelist(
        para=Whitelist(patterns_from_namespace['para']),
        span=Whitelist(patterns_from_namespace['span']),
        cont=Whitelist(patterns_from_namespace['cont']),
    )
