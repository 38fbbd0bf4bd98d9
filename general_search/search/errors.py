from __future__ import annotations


class SearchError(Exception):
    """Base class for errors raised by the search engine."""


class EmptyQueueError(SearchError, IndexError):
    """Raised when extracting from (or peeking at) an empty PriorityQueue."""


class ConfigurationError(SearchError, ValueError):
    """A problem, operator or option that violates the engine's contracts."""
