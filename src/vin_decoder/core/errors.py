"""Errors raised while parsing a VIN."""


class InvalidFormat(ValueError):
    """
    Raised when a value does not match the 17-character VIN pattern.

    The offending input is kept verbatim on ``value`` for diagnostics.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f'The value "{value}" is not a valid VIN')
