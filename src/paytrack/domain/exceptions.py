class PaytrackError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(PaytrackError):
    """Requested entry does not exist."""


class InvalidPeriodError(PaytrackError):
    """Month or year outside the supported calendar range."""


class ExportUnavailableError(PaytrackError):
    """No raster backend is installed, so the statement cannot be exported."""


class ExportError(PaytrackError):
    """The statement image could not be rendered."""
