"""Exceptions raised by the path tracer."""


class PathTracerError(Exception):
    """Base class for all path tracer errors."""


class SceneConstructionError(PathTracerError):
    """The scene cannot be accelerated, e.g. a primitive has no bounding box."""


class ConfigurationError(PathTracerError, ValueError):
    """Invalid render settings or an unknown scene/quality name."""


class RenderError(PathTracerError):
    """A tile worker failed; the whole render is aborted."""
