"""
FastMCP server definition for recipe scaling.
"""

from fastmcp import FastMCP

from mcp_recipe_scaler.tools import register_tools

# Create the MCP server
mcp = FastMCP(
    "mcp-recipe-scaler",
    instructions="Parse, convert and rescale recipe ingredient amounts",
)

# Register all tools
register_tools(mcp)
