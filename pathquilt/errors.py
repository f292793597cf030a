"""Exceptions raised by the quilting engine."""


class QuiltingError(Exception):
    """Base class for every error raised by pathquilt."""


class ConfigurationError(QuiltingError, ValueError):
    """Invalid parameter combination, detected before any synthesis work."""


class ExemplarTooSmallError(ConfigurationError):
    """The exemplar holds no valid source origin for a full tile."""

    def __init__(self, exemplar_shape, tile_size: int):
        self.exemplar_shape = tuple(exemplar_shape)
        self.tile_size = tile_size
        h, w = self.exemplar_shape[:2]
        super().__init__(
            f"Exemplar of size {w}x{h} is smaller than tile size {tile_size}"
        )
