"""Exceptions raised by the generation and storage layers."""


class GenerationFailure(Exception):
    """The language model call failed or returned unusable output."""


class StoreUnavailable(Exception):
    """A write was attempted with no store configured, or was rejected."""
