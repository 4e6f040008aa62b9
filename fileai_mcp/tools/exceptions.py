class ToolError(Exception):
    """Base exception for tool-level errors."""


class NotFoundError(ToolError):
    """Raised when no artifact name matches a lookup."""


class UnknownToolError(ToolError):
    """Raised when the host invokes a tool that is not declared."""


class MissingArgumentError(ToolError):
    """Raised when a required tool argument is absent or not a string."""
