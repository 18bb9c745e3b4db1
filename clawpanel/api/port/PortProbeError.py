"""Error raised by port backends when the socket table cannot be read."""


class PortProbeError(Exception):
    """The probe tool ran but reported an error."""
