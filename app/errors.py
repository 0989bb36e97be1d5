# app/errors.py
"""Domain errors. The HTTP mapping lives in app.main."""


class ComicStudioError(Exception):
    """Base class for errors raised by the comic studio."""


class MissingCredentialError(ComicStudioError):
    """The AI provider credential is not configured."""


class GenerationParseError(ComicStudioError):
    """The model answered with something that is not a valid story."""


class GenerationError(ComicStudioError):
    """A generation workflow could not produce a complete comic."""


class NotFoundError(ComicStudioError):
    def __init__(self, kind: str, ident: str):
        self.kind = kind
        self.ident = ident
        super().__init__(f"{kind} {ident} not found")


class StoreError(ComicStudioError):
    """A write to the relational store failed."""
