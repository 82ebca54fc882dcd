from .mcp_server import run

run()
