import sys

import anyio

from fileai_mcp.config.settings import Settings
from fileai_mcp.logging.logger import Log
from fileai_mcp.remote import FileAIHttpClient
from fileai_mcp.server.mcp_server import build_server, serve_stdio
from fileai_mcp.tools.dispatcher import build_dispatcher


def main() -> None:
    """Entry point: load settings -> build client and dispatcher -> serve stdio."""
    settings = Settings()
    Log.configure(settings.log_level)
    if not settings.fileai_api_key:
        Log.warning("FILEAI_API_KEY environment variable not set")

    try:
        with FileAIHttpClient(
            api_key=settings.fileai_api_key,
            base_url=settings.fileai_base_url,
            timeout_seconds=settings.fileai_timeout_seconds,
        ) as client:
            server = build_server(build_dispatcher(settings, client))
            Log.info("File.ai MCP server is running on stdio")
            anyio.run(serve_stdio, server)
    except KeyboardInterrupt:
        Log.info("Server shutting down gracefully")
    except Exception as exc:
        Log.exception(f"Failed to start server: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
