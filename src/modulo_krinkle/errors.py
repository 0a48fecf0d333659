class ParameterError(ValueError):
    """Raised when tiling parameters are rejected before any geometry is built."""
