import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

mcp = FastMCP("gift-occasion-dates")


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request | None) -> JSONResponse:
    """Liveness probe for remote hosting."""
    return JSONResponse({"status": "ok"})


def setup_logging(log_level: str, data_dir: Path) -> None:
    """Configure logging with file rotation and console output.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        data_dir: Base data directory: logs go to data_dir/logs/server.log.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler: exact type check avoids matching subclasses (FileHandler, etc.)
    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root_logger.addHandler(console)

    log_dir = data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "server.log"

    if not any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def initialize() -> FastMCP:
    """Set up directories, logging, and register tools. Returns the MCP server."""
    from giftdates.config import get_settings

    settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(settings.log_level, settings.data_dir)

    from giftdates.tools.occasions import register_occasion_tools

    register_occasion_tools(mcp)

    logger.info("Occasion dates MCP server initialized")
    return mcp
