"""
# Writers-Mark: sanitiser.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Property value sanitisation.

A whitelisted property name is not enough:
a value such as `red; background: url(evil)` would smuggle a second declaration
through a permitted property. Values are therefore checked on their own,
whatever name carries them.
"""

import re

_FORBIDDEN_CHARACTER_PATTERN_COMPILED = re.compile(
    pattern=r'''
        [^\x20-\x7E]
            |
        ["':;\\]
    ''',
    flags=re.VERBOSE,
)
_FORBIDDEN_SUBSTRING = 'url('


def allow_value(value: str) -> bool:
    """
    Whether a property value is safe to emit.

    A value is refused if it contains
    - anything outside printable ASCII (code points 32 to 126),
    - any of `"`, `'`, `:`, `;`, or `\\`, or
    - the substring `url(`, in any letter case.
    """
    if not isinstance(value, str):
        return False

    if _FORBIDDEN_CHARACTER_PATTERN_COMPILED.search(value) is not None:
        return False

    if _FORBIDDEN_SUBSTRING in value.lower():
        return False

    return True
