"""Custom exceptions for rhyolite."""


class RhyoliteError(Exception):
    """Base exception for rhyolite operations."""


class MissingContextError(RhyoliteError):
    """A command needs a workspace, an editor or a word that isn't there."""
