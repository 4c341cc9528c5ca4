"""Exception hierarchy for forecast acquisition."""


class WtrError(Exception):
    """Base class for all wtr errors."""


class TransportError(WtrError):
    """The HTTP request could not be completed (DNS, connect, TLS, timeout)."""


class ParseError(WtrError):
    """A forecast document could not be turned into a Forecast."""


class XmlSyntaxError(ParseError):
    pass


class StructureError(ParseError):
    pass


class AcquisitionError(WtrError):
    """Acquisition failed; ``stage`` names the step that failed."""

    stage = "unknown"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.stage}: {self.detail}"


class AcquisitionTransportError(AcquisitionError):
    stage = "transport"


class AcquisitionHttpStatusError(AcquisitionError):
    stage = "status"

    def __init__(self, status_code: int):
        super().__init__(f"HTTP status code {status_code}")
        self.status_code = status_code


class AcquisitionParseError(AcquisitionError):
    stage = "parse"
