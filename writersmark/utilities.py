"""
# Writers-Mark: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from writersmark.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT


def trim_blank_lines(lines: list[str]) -> list[str]:
    """
    Drop leading and trailing empty lines.
    """
    start = 0
    end = len(lines)

    while start < end and lines[start] == '':
        start += 1

    while end > start and lines[end - 1] == '':
        end -= 1

    return lines[start:end]


def print_verbose_comparison(label: str, string_before: str, string_after: str):
    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {label}')
    print(string_before)
    print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT)
    print(string_after)
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {label}')
    print('\n\n\n\n')
