"""
# Writers-Mark: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.

These signal programming-contract violations only.
Compilation of user-supplied text and style sheets never raises.
"""


class MalformedWhitelistException(Exception):
    _missing_namespace: str

    def __init__(self, missing_namespace: str):
        super().__init__(f'error: whitelist patterns lack the `{missing_namespace}` namespace')
        self._missing_namespace = missing_namespace

    @property
    def missing_namespace(self) -> str:
        return self._missing_namespace


class UnrecognisedContentException(Exception):
    pass
