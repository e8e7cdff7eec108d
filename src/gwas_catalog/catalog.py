"""
GWAS Catalog facade.

Wraps a ``Table`` with the column names used by the GWAS Catalog
associations export (e.g. gwas_catalog_v1.0-associations_e100_r2021-02-25.tsv)
and provides the queries used to narrow it by disease and chromosome.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .core.integrity import IntegrityReport, check_row_integrity, find_duplicate_columns
from .core.masks import paired_values
from .core.parsing import parse_float, parse_unsigned
from .core.table import Table, filter_values
from .utils.file_handlers import read_catalog
from .utils.validators import is_rsid

logger = logging.getLogger(__name__)

DISEASE_COLUMN = "DISEASE/TRAIT"
CHROMOSOME_COLUMN = "CHR_ID"
POSITION_COLUMN = "CHR_POS"
EFFECT_SIZE_COLUMN = "OR or BETA"
SNP_COLUMN = "SNPS"

CHROMOSOMES = tuple(str(i) for i in range(1, 23)) + ("X", "Y")


class GWASCatalog:
    """Interface to the association records of a GWAS Catalog export."""

    def __init__(self, table: Table):
        self.table = table

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "GWASCatalog":
        return cls(read_catalog(file_path))

    def size(self) -> int:
        """Number of associations."""
        return self.table.row_count()

    def __len__(self) -> int:
        return self.table.row_count()

    def __repr__(self) -> str:
        return f"GWASCatalog(associations={self.size()})"

    @property
    def header(self) -> Tuple[str, ...]:
        return self.table.header

    def unique_diseases(self) -> frozenset:
        return self.table.unique_values(self.table.column_index_of(DISEASE_COLUMN))

    def disease_counts(self) -> Dict[str, int]:
        """Number of associations reported for each disease/trait."""
        return self.table.value_counts(self.table.column_index_of(DISEASE_COLUMN))

    def subset(self, column_name: str, value: str) -> "GWASCatalog":
        """Catalog holding only the associations where ``column_name`` equals ``value``."""
        return GWASCatalog(self.table.subset(column_name, value))

    def get_disease(self, disease: str) -> "GWASCatalog":
        """
        Subset to a single disease/trait.

        Returns an empty catalog if the disease does not occur.
        """
        return self.subset(DISEASE_COLUMN, disease)

    def get_chromosome(self, chromosome: str) -> "GWASCatalog":
        return self.subset(CHROMOSOME_COLUMN, chromosome)

    def positions_and_effect_sizes(self, sort_by_position: bool = False) -> List[Tuple[int, float]]:
        """
        Position and effect size of every association where both are numbers.

        Diseases and chromosomes are not separated here; narrow the catalog
        first with ``get_disease`` / ``get_chromosome`` when that matters.

        Args:
            sort_by_position: Order pairs by position instead of row order

        Returns:
            List of (position, effect size) pairs
        """
        pairs = paired_values(
            self.table,
            self.table.column_index_of(POSITION_COLUMN), parse_unsigned,
            self.table.column_index_of(EFFECT_SIZE_COLUMN), parse_float,
        )
        if sort_by_position:
            pairs.sort(key=lambda pair: pair[0])
        return pairs

    def unique_rsids(self) -> frozenset:
        """Distinct single-variant rsIDs in the SNPS column."""
        return filter_values(
            self.table.unique_values(self.table.column_index_of(SNP_COLUMN)),
            is_rsid,
        )

    def summary(self, min_associations: int = 10) -> Dict:
        counts = self.disease_counts()
        return {
            "associations": self.size(),
            "n_diseases": len(counts),
            "min_associations": min_associations,
            "n_diseases_above_min": sum(1 for n in counts.values() if n >= min_associations),
        }

    def integrity_check(self) -> IntegrityReport:
        return check_row_integrity(self.table)

    def duplicate_columns(self) -> Dict[str, List[int]]:
        return find_duplicate_columns(self.table.header)

    def iter_disease_chromosomes(
        self,
        diseases: Optional[Sequence[str]] = None,
        chromosomes: Sequence[str] = CHROMOSOMES,
    ) -> Iterator[Tuple[str, str, "GWASCatalog"]]:
        """
        Yield ``(disease, chromosome, catalog)`` for every combination.

        Each disease subset is built once and then narrowed per chromosome.
        """
        if diseases is None:
            diseases = sorted(self.unique_diseases())

        for disease in diseases:
            by_disease = self.get_disease(disease)
            if not len(by_disease):
                continue
            for chromosome in chromosomes:
                yield disease, chromosome, by_disease.get_chromosome(chromosome)

    def scan_disease_chromosomes(
        self,
        min_pairs: int = 1,
        diseases: Optional[Sequence[str]] = None,
        chromosomes: Sequence[str] = CHROMOSOMES,
    ) -> List[Tuple[str, str, int]]:
        """
        Count paired (position, effect size) values per disease and chromosome.

        Returns:
            ``(disease, chromosome, n_pairs)`` for every combination with at
            least ``min_pairs`` pairs
        """
        results = []
        for disease, chromosome, subset in self.iter_disease_chromosomes(diseases, chromosomes):
            n_pairs = len(subset.positions_and_effect_sizes())
            if n_pairs >= min_pairs:
                results.append((disease, chromosome, n_pairs))

        logger.info(f"Scanned disease/chromosome subsets: {len(results)} with >= {min_pairs} pairs")
        return results
