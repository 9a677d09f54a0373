"""Entry point of the ${PROJECT_NAME} MCP server."""

from mcp.server.fastmcp import FastMCP

from .log import configure_logging
from .tools import sum_calculator

logger = configure_logging()

server = FastMCP("${PROJECT_NAME}")


@server.tool(name=sum_calculator.TOOL_NAME, description="Add two numbers.")
def sum_numbers(a: float, b: float) -> str:
    return str(sum_calculator.add(a, b))


def main() -> None:
    logger.info("MCP Server running on stdio.")
    server.run()


if __name__ == "__main__":
    main()
