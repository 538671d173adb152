"""
# Writers-Mark: trie.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Prefix tree over a fixed set of patterns.
"""

from typing import Iterable, NamedTuple


class TrieNode:
    """
    A node of a trie.

    - `is_terminal`: some pattern ends exactly here.
    - `is_prefix_accepting`: some wildcard pattern ends here,
      so that any key walking through this node is accepted.
    """
    __slots__ = ('children', 'is_terminal', 'is_prefix_accepting')

    children: dict[str, 'TrieNode']
    is_terminal: bool
    is_prefix_accepting: bool

    def __init__(self):
        self.children = {}
        self.is_terminal = False
        self.is_prefix_accepting = False


class Trie:
    """
    Immutable prefix tree built once from a fixed set of patterns.

    Exact patterns mark their final node terminal.
    Prefix patterns (given separately, without any wildcard character)
    mark their final node prefix-accepting; see `accepts(...)`.
    """
    _root: 'TrieNode'

    def __init__(self, patterns: Iterable[str], prefix_patterns: Iterable[str] = ()):
        self._root = TrieNode()

        for pattern in patterns:
            self._insert(pattern).is_terminal = True

        for prefix_pattern in prefix_patterns:
            self._insert(prefix_pattern).is_prefix_accepting = True

    def _insert(self, pattern: str) -> 'TrieNode':
        node = self._root
        for character in pattern:
            try:
                node = node.children[character]
            except KeyError:
                child = TrieNode()
                node.children[character] = child
                node = child

        return node

    def has(self, key: str) -> bool:
        """
        Whether `key` is exactly one of the patterns.
        """
        node = self._root
        for character in key:
            node = node.children.get(character)
            if node is None:
                return False

        return node.is_terminal

    def accepts(self, key: str) -> bool:
        """
        Whether `key` is exactly one of the patterns,
        or begins with (or equals) one of the prefix patterns.
        """
        node = self._root
        if node.is_prefix_accepting:
            return True

        for character in key:
            node = node.children.get(character)
            if node is None:
                return False
            if node.is_prefix_accepting:
                return True

        return node.is_terminal

    def first_match(self, haystack: str, start_index: int = 0) -> 'TrieMatch':
        """
        Find the leftmost position at or after `start_index` where some pattern begins.

        Returns that position and every pattern matching there, longest first.
        If no pattern occurs, returns position -1 and an empty list.

        The walk from a candidate start position is extended one character at a time,
        recording every terminal node passed.
        When the walk dead-ends (or the haystack runs out) with at least one pattern recorded,
        the candidate is returned.
        When it dead-ends with nothing recorded,
        the walk restarts one character past the abandoned candidate,
        so that a pattern beginning inside the abandoned partial match can still be found.
        """
        root = self._root
        haystack_length = len(haystack)
        match_start = max(start_index, 0)

        while match_start < haystack_length:
            patterns: list[str] = []
            node = root
            cursor = match_start

            while cursor < haystack_length:
                node = node.children.get(haystack[cursor])
                if node is None:
                    break

                cursor += 1
                if node.is_terminal:
                    patterns.append(haystack[match_start:cursor])

            if len(patterns) > 0:
                patterns.reverse()
                return TrieMatch(match_start, patterns)

            match_start += 1

        return TrieMatch(-1, [])


class TrieMatch(NamedTuple):
    index: int
    patterns: list[str]
