"""
MCP server entry point for recipe scaling.

Run with: python -m mcp_recipe_scaler
"""

# Suppress Pydantic deprecation warnings BEFORE any imports
import warnings
warnings.filterwarnings("ignore", category=DeprecationWarning)

import sys

try:
    print("[RECIPE-SCALER] Importing server module...", file=sys.stderr, flush=True)
    from mcp_recipe_scaler.config import get_config
    from mcp_recipe_scaler.server import mcp

    if __name__ == "__main__":
        config = get_config()
        print(
            f"[RECIPE-SCALER] format={config.default_format} strict={config.strict} "
            f"flags={sorted(config.default_flags)}",
            file=sys.stderr,
            flush=True,
        )
        print("[RECIPE-SCALER] Starting MCP server...", file=sys.stderr, flush=True)
        # Let FastMCP auto-detect transport
        mcp.run(show_banner=False)
        print("[RECIPE-SCALER] Server exited normally", file=sys.stderr, flush=True)
except Exception as e:
    print(f"Fatal error starting recipe scaler MCP: {e}", file=sys.stderr)
    import traceback
    traceback.print_exc(file=sys.stderr)
    sys.exit(1)
