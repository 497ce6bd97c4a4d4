"""
Error types raised by the statistics pipeline.
"""


class ScriptStatsError(Exception):
    """Base class for all pipeline errors."""


class UsageError(ScriptStatsError):
    """Wrong command-line usage."""


class MalformedInputError(ScriptStatsError, ValueError):
    """Source text the scanner cannot make sense of.

    Raised for a block annotation without an end marker and for a method
    signature lookup that runs past the start of the input.
    """

    def __init__(self, offset, reason):
        self.offset = offset
        self.reason = reason
        super().__init__(f"{reason} (at offset {offset})")
