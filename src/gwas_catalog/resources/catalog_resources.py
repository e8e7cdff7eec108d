"""
Catalog Resources for GWAS Catalog MCP Server.

Exposes the catalog configured by GWAS_CATALOG_PATH as MCP resources.
"""

import json
import logging
from urllib.parse import urlparse, unquote

from mcp.types import Resource

from ..tools.catalog_tools import load_catalog

logger = logging.getLogger(__name__)


# Only static resources: the catalog file comes from the environment
RESOURCES = [
    Resource(
        uri="gwas://catalog/summary",
        name="GWAS Catalog Summary",
        description="Association and disease counts of the configured GWAS Catalog export",
        mimeType="application/json"
    ),
    Resource(
        uri="gwas://catalog/diseases",
        name="GWAS Catalog Diseases",
        description="All diseases/traits in the configured GWAS Catalog export with association counts",
        mimeType="application/json"
    ),
    Resource(
        uri="gwas://catalog/columns",
        name="GWAS Catalog Columns",
        description="Header of the configured GWAS Catalog export",
        mimeType="application/json"
    ),
]


async def handle_resource(uri: str) -> str:
    """Handle resource read requests."""
    logger.info(f"Reading resource: {uri}")

    parsed = urlparse(str(uri))
    scheme = parsed.scheme
    path = unquote(parsed.netloc + parsed.path)

    if scheme == "gwas":
        return await handle_gwas_resource(path)

    raise ValueError(f"Unknown resource scheme: {scheme}")


async def handle_gwas_resource(path: str) -> str:
    """Handle local GWAS Catalog resource requests."""

    parts = path.strip('/').split('/')

    if len(parts) == 2 and parts[0] == "catalog":
        catalog = load_catalog()

        if parts[1] == "summary":
            return json.dumps(catalog.summary(), indent=2)
        elif parts[1] == "diseases":
            counts = sorted(catalog.disease_counts().items(), key=lambda item: (-item[1], item[0]))
            return json.dumps(
                [{"disease": disease, "associations": n} for disease, n in counts],
                indent=2
            )
        elif parts[1] == "columns":
            return json.dumps(list(catalog.header), indent=2)

    raise ValueError(f"Invalid GWAS Catalog resource path: {path}")
