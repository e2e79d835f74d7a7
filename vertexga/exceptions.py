"""Exception types raised by vertexga."""

from __future__ import annotations


class VertexGAError(Exception):
    """Base class for all vertexga errors."""


class ConfigurationError(VertexGAError, ValueError):
    """An operator or run was invoked with an unusable configuration."""


class GraphFormatError(VertexGAError, ValueError):
    """Graph input is malformed or inconsistent."""
