"""Custom exceptions for html2delta."""


class Html2DeltaError(Exception):
    """Base exception for html2delta operations."""


class ConfigurationError(Html2DeltaError):
    """Invalid decoder options."""


class UnknownTagError(Html2DeltaError):
    """A tag reached a resolver that has no rule for it.

    The tag tables in ``html2delta.tags`` and the decoder dispatch are out of
    sync; this is a bug in html2delta, not in the input document.
    """

    def __init__(self, tag: str, resolver: str) -> None:
        super().__init__(f"{resolver} has no rule for <{tag}>")
        self.tag = tag
        self.resolver = resolver
