"""Error types for the tool layer."""


class ToolError(Exception):
    """Base error for all tool registration and execution failures."""


class DuplicateToolError(ToolError):
    """Two providers (or two registrations) claim the same tool name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool already registered: {name}")


class ToolNotFoundError(ToolError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolExecutionError(ToolError):
    """A tool invocation raised while running."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {name}" + (f": {detail}" if detail else ""))
