"""Core parity logic — models, numeral parsing, evaluation, and tool routing.

This module is framework-agnostic. It has no dependency on MCP or any
transport. The server module adapts its errors and outcomes to the protocol.
"""
