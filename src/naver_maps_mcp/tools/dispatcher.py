"""
Tool dispatch table.

Tool modules register their handlers here with the same ``tool()``
decorator shape the MCP server offers; the table is then bound onto the
server so stdio and HTTP transports share one set of tools.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ..constants import ErrorMessages
from ..exceptions import UnknownToolError
from ..models.responses import ErrorResponse, format_response

logger = logging.getLogger(__name__)

ToolHandler = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: handler plus its argument contract."""

    name: str
    handler: ToolHandler
    required: tuple[str, ...]
    accepted: frozenset[str]
    description: str | None = None


class ToolDispatcher:
    """Fixed name -> handler table with a uniform error envelope."""

    def __init__(self):
        self._tools: dict[str, ToolSpec] = {}

    def tool(self, name: str | None = None, description: str | None = None):
        """Decorator registering an async handler under ``name``."""

        def decorator(fn: ToolHandler) -> ToolHandler:
            params = inspect.signature(fn).parameters.values()
            spec = ToolSpec(
                name=name or fn.__name__,
                handler=fn,
                required=tuple(p.name for p in params if p.default is inspect.Parameter.empty),
                accepted=frozenset(p.name for p in params),
                description=description or inspect.getdoc(fn),
            )
            self._tools[spec.name] = spec
            return fn

        return decorator

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def bind(self, mcp) -> None:
        """Register every tool in the table with an MCP server."""
        for spec in self._tools.values():
            mcp.tool(name=spec.name, description=spec.description)(spec.handler)
        logger.debug("Bound %d tools to MCP server", len(self._tools))

    async def dispatch(
        self, name: str, arguments: dict | None = None, output_mode: str = "json"
    ) -> str:
        """Call a tool by name. Never raises: failures become ErrorResponse.

        Args:
            name: Tool name
            arguments: Tool arguments as delivered by the client
            output_mode: Format for dispatcher-level errors ("json" or "text")

        Returns:
            The tool's formatted response, or a formatted ErrorResponse
        """
        try:
            spec = self.get(name)
        except UnknownToolError as e:
            logger.warning("%s", e)
            return format_response(ErrorResponse.from_exception(e, tool=name), output_mode)

        arguments = dict(arguments or {})
        missing = [arg for arg in spec.required if arg not in arguments]
        unexpected = sorted(set(arguments) - spec.accepted)
        if missing or unexpected:
            if missing:
                message = ErrorMessages.MISSING_ARGUMENTS.format(name, ", ".join(missing))
            else:
                message = ErrorMessages.INVALID_ARGUMENTS.format(
                    name, "unexpected " + ", ".join(unexpected)
                )
            logger.warning(message)
            response = ErrorResponse(error=message, error_type="invalid_arguments", tool=name)
            return format_response(response, output_mode)

        logger.debug("Dispatching %s with %s", name, arguments)
        try:
            return await spec.handler(**arguments)
        except Exception as e:
            logger.error("%s failed: %s", name, e)
            return format_response(ErrorResponse.from_exception(e, tool=name), output_mode)
