class MazeGenError(ValueError):
    pass


class InvalidPlacement(MazeGenError):
    """Entrance and exit rules cannot yield two distinct cells."""


class InvalidDimensions(MazeGenError):
    """Raster too small (or too large for the packed cell key) to hold a maze."""


class InvalidColor(MazeGenError):
    """Colour index outside the 16-colour palette."""
