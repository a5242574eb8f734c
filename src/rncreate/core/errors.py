"""Exceptions raised by the scaffolding core.

Filesystem failures are not wrapped: they surface as plain ``OSError``.
"""


class ScaffoldError(Exception):
    """Base exception for rn-create-template."""
    pass


class UnsupportedKindError(ScaffoldError):
    """Requested artifact kind is not in the registry."""

    def __init__(self, kind: str):
        super().__init__(f'Kind "{kind}" is not supported.')
        self.kind = kind


class UserCancelledError(ScaffoldError):
    """User aborted an interactive prompt."""
    pass
