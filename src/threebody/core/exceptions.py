"""
Exceptions raised by the integration core.
"""


class CoincidentBodiesError(ZeroDivisionError):
    """
    Raised when two bodies occupy exactly the same position.

    The inverse-square force law is undefined at zero separation. Initial
    conditions and the time step must be chosen so that no pair ever
    reaches zero distance; this error reports a violation of that
    precondition instead of letting non-finite values propagate.
    """
