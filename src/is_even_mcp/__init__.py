"""Is-Even MCP Server.

Ask your AI whether a number is even — decimal, binary, hex, or scientific
notation, with a confidence rating to match.
"""

__version__ = "1.0.0"
