"""Core business logic: request models, lead normalization, the Apify client
and the candidate search flow.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework.
"""
