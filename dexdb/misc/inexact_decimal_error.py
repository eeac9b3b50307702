class InexactDecimalError(ValueError):
    """The database dialect cannot store fixed-point values exactly."""
