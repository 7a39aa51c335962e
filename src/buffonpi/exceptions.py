"""
Exceptions
==========
Errors raised while setting up a simulation run.
"""


class InvalidConfiguration(ValueError):
    """Raised when the field or run parameters cannot describe a valid simulation."""
