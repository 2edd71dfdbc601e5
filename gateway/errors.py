# gateway/errors.py
#
# Every failure the gateway knows how to name. All of them except
# ConfigurationError are caught at the dispatch boundary and turned into
# an error-flagged tool result; ConfigurationError stops the process
# before the MCP server starts.


class GatewayError(Exception):
    """Base class for all gateway failures."""


class ConfigurationError(GatewayError):
    """The endpoint or API key is missing. Fatal at startup."""


class ArgumentValidationError(GatewayError):
    """The call's arguments don't match the operation's declared shape."""


class UnknownOperationError(ArgumentValidationError):
    """The client asked for an operation we don't advertise."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class RemoteTransportError(GatewayError):
    """
    The Apps Script endpoint couldn't be reached or answered with a
    non-success status. status_code is None for network-level failures.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteFormatError(GatewayError):
    """The endpoint answered, but not with data we can use."""


class AttachmentWriteError(GatewayError):
    """Writing a downloaded attachment to disk failed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
