"""
GWAS Catalog MCP Tools Package
"""

from .catalog_tools import register_catalog_tools

__all__ = [
    "register_catalog_tools",
]
