class JyotishError(Exception):
    """
    Base exception for all engine errors.
    """
    pass


class InvalidBirthDetailsError(JyotishError, ValueError):
    """
    Raised when birth date, time or coordinates cannot be used for a chart.
    """
    pass


class InvalidTimeFormatError(JyotishError, ValueError):
    """
    Raised when a wall-clock string is not in HH:MM form.
    """
    pass


class UnsupportedPlanetError(JyotishError):
    """
    Raised when a planet without a longitude formula is requested.
    """

    def __init__(self, planet):
        self.planet = planet
        super().__init__(f"No longitude formula for {planet}; supported: Sun, Moon")
