"""
GWAS Catalog Tools for MCP Server.

Tools for summarizing a local GWAS Catalog associations export, narrowing it
by disease and chromosome, and extracting positions with effect sizes.
"""

import json
import logging
import os
from functools import lru_cache
from typing import Any, Dict, Optional

import numpy as np

from mcp.types import Tool

from ..catalog import GWASCatalog
from ..utils.validators import (
    CATALOG_EXTENSIONS,
    validate_chromosome,
    validate_count,
    validate_file_path,
)
from ..utils.file_handlers import write_results

logger = logging.getLogger(__name__)

MAX_LISTED = 200

_CATALOG_PATH_PROPERTY = {
    "type": "string",
    "description": "Path to GWAS Catalog associations TSV (defaults to GWAS_CATALOG_PATH)"
}
_DISEASE_PROPERTY = {
    "type": "string",
    "description": "Exact DISEASE/TRAIT value to subset by (e.g., 'Type 2 diabetes')"
}
_CHROMOSOME_PROPERTY = {
    "type": "string",
    "description": "Chromosome to subset by (1-22, X, Y)"
}
_OUTPUT_PATH_PROPERTY = {
    "type": "string",
    "description": "Optional path to save results as TSV"
}


# Define catalog tools
CATALOG_TOOLS = [
    Tool(
        name="catalog_summary",
        description="Summarize a GWAS Catalog export: number of associations, distinct diseases/traits, and diseases with at least a minimum number of associations.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY,
                "min_associations": {
                    "type": "integer",
                    "description": "Minimum associations for a disease to be counted (default: 10)",
                    "default": 10
                }
            },
            "required": []
        }
    ),
    Tool(
        name="list_diseases",
        description="List the diseases/traits in a GWAS Catalog export with their association counts, most frequent first.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY,
                "min_associations": {
                    "type": "integer",
                    "description": "Only list diseases with at least this many associations (default: 1)",
                    "default": 1
                }
            },
            "required": []
        }
    ),
    Tool(
        name="subset_catalog",
        description="Narrow a GWAS Catalog export to one disease/trait and/or one chromosome.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY,
                "disease": _DISEASE_PROPERTY,
                "chromosome": _CHROMOSOME_PROPERTY,
                "output_path": _OUTPUT_PATH_PROPERTY
            },
            "required": []
        }
    ),
    Tool(
        name="positions_and_effect_sizes",
        description="Extract (CHR_POS, OR or BETA) pairs for associations where both the position and the effect size are valid numbers.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY,
                "disease": _DISEASE_PROPERTY,
                "chromosome": _CHROMOSOME_PROPERTY,
                "sort_by_position": {
                    "type": "boolean",
                    "description": "Sort pairs by position (default: false, keeps file order)",
                    "default": False
                },
                "output_path": _OUTPUT_PATH_PROPERTY
            },
            "required": []
        }
    ),
    Tool(
        name="unique_rsids",
        description="List the distinct single-variant rsIDs in the SNPS column, optionally for one disease/trait.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY,
                "disease": _DISEASE_PROPERTY
            },
            "required": []
        }
    ),
    Tool(
        name="check_catalog_integrity",
        description="Check that every association row has as many fields as the header, and report duplicated column names.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY
            },
            "required": []
        }
    ),
    Tool(
        name="scan_disease_chromosomes",
        description="For every disease/trait and chromosome, count associations with a valid position and effect size.",
        inputSchema={
            "type": "object",
            "properties": {
                "catalog_path": _CATALOG_PATH_PROPERTY,
                "min_pairs": {
                    "type": "integer",
                    "description": "Only report combinations with at least this many pairs (default: 1)",
                    "default": 1
                }
            },
            "required": []
        }
    ),
]


async def handle_catalog_tool(name: str, arguments: Dict[str, Any]) -> str:
    """Handle catalog tool calls."""

    if name == "catalog_summary":
        return await catalog_summary(
            catalog_path=arguments.get("catalog_path"),
            min_associations=arguments.get("min_associations", 10)
        )

    elif name == "list_diseases":
        return await list_diseases(
            catalog_path=arguments.get("catalog_path"),
            min_associations=arguments.get("min_associations", 1)
        )

    elif name == "subset_catalog":
        return await subset_catalog(
            catalog_path=arguments.get("catalog_path"),
            disease=arguments.get("disease"),
            chromosome=arguments.get("chromosome"),
            output_path=arguments.get("output_path")
        )

    elif name == "positions_and_effect_sizes":
        return await positions_and_effect_sizes(
            catalog_path=arguments.get("catalog_path"),
            disease=arguments.get("disease"),
            chromosome=arguments.get("chromosome"),
            sort_by_position=arguments.get("sort_by_position", False),
            output_path=arguments.get("output_path")
        )

    elif name == "unique_rsids":
        return await unique_rsids(
            catalog_path=arguments.get("catalog_path"),
            disease=arguments.get("disease")
        )

    elif name == "check_catalog_integrity":
        return await check_catalog_integrity(
            catalog_path=arguments.get("catalog_path")
        )

    elif name == "scan_disease_chromosomes":
        return await scan_disease_chromosomes(
            catalog_path=arguments.get("catalog_path"),
            min_pairs=arguments.get("min_pairs", 1)
        )

    raise ValueError(f"Unknown catalog tool: {name}")


@lru_cache(maxsize=4)
def _load_cached(path: str, mtime_ns: int) -> GWASCatalog:
    return GWASCatalog.from_file(path)


def load_catalog(catalog_path: Optional[str] = None) -> GWASCatalog:
    """
    Load a catalog, reusing the parsed copy while the file is unchanged.

    Falls back to the GWAS_CATALOG_PATH environment variable.
    """
    catalog_path = catalog_path or os.getenv("GWAS_CATALOG_PATH")
    if not catalog_path:
        raise ValueError("No catalog_path given and GWAS_CATALOG_PATH is not set")

    path = validate_file_path(catalog_path, allowed_extensions=CATALOG_EXTENSIONS)
    return _load_cached(str(path), path.stat().st_mtime_ns)


def narrow(
    catalog: GWASCatalog,
    disease: Optional[str] = None,
    chromosome: Optional[str] = None
) -> GWASCatalog:
    """Subset by disease, then by chromosome, skipping whichever is not given."""
    if disease:
        catalog = catalog.get_disease(disease)
    if chromosome:
        catalog = catalog.get_chromosome(validate_chromosome(chromosome))
    return catalog


def _json_float(value: float):
    """JSON has no infinity; non-finite values are written as strings."""
    return value if np.isfinite(value) else str(value)


def _error(e: Exception) -> str:
    return json.dumps({
        "error": str(e),
        "type": type(e).__name__
    }, indent=2)


async def catalog_summary(
    catalog_path: Optional[str] = None,
    min_associations: int = 10
) -> str:
    """
    Summarize association and disease counts.
    """
    logger.info(f"Summarizing catalog: {catalog_path}")

    try:
        min_associations = validate_count(min_associations, "min_associations", min_value=1)
        catalog = load_catalog(catalog_path)

        result = catalog.summary(min_associations=min_associations)
        result["columns"] = list(catalog.header)

        return json.dumps(result, indent=2)

    except Exception as e:
        logger.exception(f"Catalog summary failed: {e}")
        return _error(e)


async def list_diseases(
    catalog_path: Optional[str] = None,
    min_associations: int = 1
) -> str:
    """
    List diseases/traits with their association counts.
    """
    logger.info(f"Listing diseases in: {catalog_path}")

    try:
        min_associations = validate_count(min_associations, "min_associations", min_value=1)
        catalog = load_catalog(catalog_path)

        counts = [
            (disease, n) for disease, n in catalog.disease_counts().items()
            if n >= min_associations
        ]
        counts.sort(key=lambda item: (-item[1], item[0]))

        result = {
            "n_diseases": len(counts),
            "min_associations": min_associations,
            "diseases": [
                {"disease": disease, "associations": n} for disease, n in counts[:MAX_LISTED]
            ],
            "truncated": len(counts) > MAX_LISTED
        }

        return json.dumps(result, indent=2)

    except Exception as e:
        logger.exception(f"Disease listing failed: {e}")
        return _error(e)


async def subset_catalog(
    catalog_path: Optional[str] = None,
    disease: Optional[str] = None,
    chromosome: Optional[str] = None,
    output_path: Optional[str] = None
) -> str:
    """
    Narrow the catalog by disease and/or chromosome.
    """
    logger.info(f"Subsetting catalog {catalog_path}: disease={disease}, chromosome={chromosome}")

    try:
        catalog = load_catalog(catalog_path)
        subset = narrow(catalog, disease, chromosome)

        result = {
            "disease": disease,
            "chromosome": chromosome,
            "total_associations": catalog.size(),
            "associations": subset.size(),
            "unique_rsids": len(subset.unique_rsids()),
        }

        if output_path:
            write_results(subset.table, output_path, format='tsv')
            result['results_saved_to'] = output_path

        return json.dumps(result, indent=2)

    except Exception as e:
        logger.exception(f"Catalog subsetting failed: {e}")
        return _error(e)


async def positions_and_effect_sizes(
    catalog_path: Optional[str] = None,
    disease: Optional[str] = None,
    chromosome: Optional[str] = None,
    sort_by_position: bool = False,
    output_path: Optional[str] = None
) -> str:
    """
    Extract positions and effect sizes where both parse as numbers.

    Associations with a missing or non-numeric position or effect size are
    left out.
    """
    logger.info(f"Extracting positions and effect sizes: disease={disease}, chromosome={chromosome}")

    try:
        catalog = load_catalog(catalog_path)
        subset = narrow(catalog, disease, chromosome)
        pairs = subset.positions_and_effect_sizes(sort_by_position=bool(sort_by_position))

        result = {
            "disease": disease,
            "chromosome": chromosome,
            "associations": subset.size(),
            "n_pairs": len(pairs),
            "n_excluded": subset.size() - len(pairs),
        }

        if pairs:
            effect_sizes = np.array([es for _, es in pairs], dtype=float)
            finite = effect_sizes[np.isfinite(effect_sizes)]
            if finite.size:
                result["effect_size_stats"] = {
                    "min": float(np.min(finite)),
                    "median": float(np.median(finite)),
                    "max": float(np.max(finite)),
                    "n_below_one": int(np.sum(finite < 1)),
                }
            result["pairs"] = [
                {"position": pos, "effect_size": _json_float(es)} for pos, es in pairs[:MAX_LISTED]
            ]
            result["truncated"] = len(pairs) > MAX_LISTED

        if output_path:
            records = [{"CHR_POS": pos, "OR or BETA": _json_float(es)} for pos, es in pairs]
            write_results(records, output_path, format='json')
            result['results_saved_to'] = output_path

        return json.dumps(result, indent=2, allow_nan=False)

    except Exception as e:
        logger.exception(f"Position/effect size extraction failed: {e}")
        return _error(e)


async def unique_rsids(
    catalog_path: Optional[str] = None,
    disease: Optional[str] = None
) -> str:
    """
    List distinct rsIDs, skipping multi-variant and non-rs entries.
    """
    logger.info(f"Collecting rsIDs: disease={disease}")

    try:
        catalog = narrow(load_catalog(catalog_path), disease)
        rsids = sorted(catalog.unique_rsids())

        result = {
            "disease": disease,
            "associations": catalog.size(),
            "n_rsids": len(rsids),
            "rsids": rsids[:MAX_LISTED],
            "truncated": len(rsids) > MAX_LISTED
        }

        return json.dumps(result, indent=2)

    except Exception as e:
        logger.exception(f"rsID collection failed: {e}")
        return _error(e)


async def check_catalog_integrity(catalog_path: Optional[str] = None) -> str:
    """
    Report rows whose field count disagrees with the header.
    """
    logger.info(f"Checking catalog integrity: {catalog_path}")

    try:
        catalog = load_catalog(catalog_path)
        report = catalog.integrity_check()

        result = report.to_dict()
        result["mismatches"] = result["mismatches"][:MAX_LISTED]
        result["duplicate_columns"] = catalog.duplicate_columns()

        return json.dumps(result, indent=2)

    except Exception as e:
        logger.exception(f"Integrity check failed: {e}")
        return _error(e)


async def scan_disease_chromosomes(
    catalog_path: Optional[str] = None,
    min_pairs: int = 1
) -> str:
    """
    Count valid (position, effect size) pairs per disease and chromosome.
    """
    logger.info(f"Scanning disease/chromosome subsets of: {catalog_path}")

    try:
        min_pairs = validate_count(min_pairs, "min_pairs", min_value=1)
        catalog = load_catalog(catalog_path)

        hits = catalog.scan_disease_chromosomes(min_pairs=min_pairs)
        hits.sort(key=lambda hit: -hit[2])

        result = {
            "min_pairs": min_pairs,
            "n_subsets": len(hits),
            "subsets": [
                {"disease": disease, "chromosome": chrom, "n_pairs": n}
                for disease, chrom, n in hits[:MAX_LISTED]
            ],
            "truncated": len(hits) > MAX_LISTED
        }

        return json.dumps(result, indent=2)

    except Exception as e:
        logger.exception(f"Disease/chromosome scan failed: {e}")
        return _error(e)


def register_catalog_tools():
    """Return catalog tools for registration."""
    return CATALOG_TOOLS
