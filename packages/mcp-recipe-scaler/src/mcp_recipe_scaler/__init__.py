"""MCP server exposing recipe-common amount parsing, conversion and scaling."""
