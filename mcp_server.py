from fastmcp import FastMCP

mcp = FastMCP("figma-dark-mode")
