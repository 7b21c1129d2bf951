"""Is-Even MCP Server.

Low-level MCP server with one tool, is_even, over stdio.
Run: is-even-mcp
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import anyio
import mcp.types as types
from anyio.abc import TaskStatus
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .config import LOG_FORMAT, SERVER_NAME, VERSION, get_log_level
from .core import router
from .core.router import ToolCallError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(server: Server) -> AsyncIterator[dict]:
    """Configure logging for the lifetime of the session."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
    logger.info("IsEven MCP server running (%s %s)", server.name, VERSION)
    yield {}


server: Server = Server(SERVER_NAME, version=VERSION, lifespan=lifespan)


# ─── tools/list ──────────────────────────────────────────────────────────────


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    """Advertise the is_even tool and its input schema."""
    return [types.Tool(**descriptor) for descriptor in router.list_tools()]


# ─── tools/call ──────────────────────────────────────────────────────────────
# Registered directly on the handler table so McpError reaches the client as a
# JSON-RPC error instead of being folded into an isError result.


async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
    """Route a tools/call request through the core router."""
    name = req.params.name
    arguments = req.params.arguments if req.params.arguments is not None else {}

    try:
        outcome = router.call_tool(name, arguments)
    except ToolCallError as exc:
        logger.warning("Rejected call to %s: %s", name, exc.message)
        raise McpError(types.ErrorData(code=exc.kind.code, message=exc.message, data=exc.data)) from exc
    except Exception:
        logger.exception("[MCP Error] Unhandled failure in call to %s", name)
        raise

    return types.ServerResult(
        types.CallToolResult(
            content=[types.TextContent(type="text", text=outcome.text)],
            isError=outcome.is_error,
        )
    )


server.request_handlers[types.CallToolRequest] = call_tool


async def _exit_on_interrupt(
    read_stream: MemoryObjectReceiveStream,
    write_stream: MemoryObjectSendStream,
    *,
    task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
) -> None:
    """On SIGINT, close the transport streams and exit with status 0.

    The stdio reader blocks in a worker thread until stdin reaches EOF, so the
    process exits directly instead of unwinding the transport context.
    """
    with anyio.open_signal_receiver(signal.SIGINT) as signals:
        task_status.started()
        async for _ in signals:
            logger.info("Interrupted, closing stdio transport")
            await read_stream.aclose()
            await write_stream.aclose()
            logging.shutdown()
            sys.stdout.flush()
            os._exit(0)


async def serve_stdio() -> None:
    """Serve MCP over stdin/stdout until the client disconnects or SIGINT arrives."""
    async with stdio_server() as (read_stream, write_stream):
        async with anyio.create_task_group() as tg:
            await tg.start(_exit_on_interrupt, read_stream, write_stream)
            await server.run(read_stream, write_stream, server.create_initialization_options())
            tg.cancel_scope.cancel()


def main():
    """Entry point for the CLI command."""
    try:
        asyncio.run(serve_stdio())
    except KeyboardInterrupt:
        logger.info("Interrupted, stdio transport closed")


if __name__ == "__main__":
    main()
