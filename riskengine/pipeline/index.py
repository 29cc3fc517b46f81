"""Relationship index: supplier/director lookups built once per data set."""
from collections import defaultdict
from dataclasses import dataclass, field

from riskengine.exceptions import DataIntegrityError, EntityNotFoundError
from riskengine.logger import setup_logger
from riskengine.models.profile import DirectorRiskProfile, EntityKind, SupplierRiskProfile

logger = setup_logger(__name__)


@dataclass
class DanglingReference:
    """A relationship id that points at a record missing from the data set."""
    source_kind: EntityKind
    source_id: str
    missing_id: str

    def describe(self) -> str:
        target = "director" if self.source_kind == EntityKind.supplier else "supplier"
        return f"{self.source_kind.value} {self.source_id} references unknown {target} {self.missing_id}"


@dataclass
class RelationshipIndex:
    suppliers: dict[str, SupplierRiskProfile]
    directors: dict[str, DirectorRiskProfile]
    # director id -> supplier ids listing that director, in supplier order
    suppliers_by_director: dict[str, list[str]]
    # site id -> supplier ids linked to that site, in supplier order
    suppliers_by_site: dict[str, list[str]]
    dangling: list[DanglingReference] = field(default_factory=list)

    def get_supplier(self, supplier_id: str) -> SupplierRiskProfile:
        supplier = self.suppliers.get(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(EntityKind.supplier.value, supplier_id)
        return supplier

    def get_director(self, director_id: str) -> DirectorRiskProfile:
        director = self.directors.get(director_id)
        if director is None:
            raise EntityNotFoundError(EntityKind.director.value, director_id)
        return director

    def directors_of(self, supplier: SupplierRiskProfile) -> list[DirectorRiskProfile]:
        """Known directors of a supplier, sorted by id. Dangling ids are skipped."""
        return [self.directors[d] for d in sorted(supplier.director_ids) if d in self.directors]

    def suppliers_of(self, director: DirectorRiskProfile) -> list[SupplierRiskProfile]:
        """Suppliers that list this director among their director ids."""
        return [self.suppliers[s] for s in self.suppliers_by_director.get(director.id, [])]

    def shared_director_peers(self, supplier: SupplierRiskProfile) -> set[str]:
        """Other suppliers sharing at least one director id with this one."""
        peers = set()
        for director_id in supplier.director_ids:
            peers.update(self.suppliers_by_director.get(director_id, []))
        peers.discard(supplier.id)
        return peers

    def site_cluster_peers(self, supplier: SupplierRiskProfile) -> set[str]:
        """Other suppliers in the same geographic tier sharing a linked site."""
        peers = set()
        for site_id in supplier.linked_site_ids:
            for other_id in self.suppliers_by_site.get(site_id, []):
                if self.suppliers[other_id].geographic_risk == supplier.geographic_risk:
                    peers.add(other_id)
        peers.discard(supplier.id)
        return peers


def build_relationship_index(
    suppliers: list[SupplierRiskProfile],
    directors: list[DirectorRiskProfile],
    dangling_policy: str = "warn",
) -> RelationshipIndex:
    """
    Index suppliers and directors by id and invert the board relationships.

    dangling_policy decides what happens to ids that point at missing
    records: "skip" ignores them, "warn" logs each one, "error" raises
    DataIntegrityError. Duplicate ids always raise.
    """
    suppliers_by_id = {}
    for supplier in suppliers:
        if supplier.id in suppliers_by_id:
            raise DataIntegrityError(f"Duplicate supplier id {supplier.id}")
        suppliers_by_id[supplier.id] = supplier

    directors_by_id = {}
    for director in directors:
        if director.id in directors_by_id:
            raise DataIntegrityError(f"Duplicate director id {director.id}")
        directors_by_id[director.id] = director

    suppliers_by_director = defaultdict(list)
    suppliers_by_site = defaultdict(list)
    dangling = []

    for supplier in suppliers:
        for director_id in sorted(supplier.director_ids):
            suppliers_by_director[director_id].append(supplier.id)
            if director_id not in directors_by_id:
                dangling.append(DanglingReference(EntityKind.supplier, supplier.id, director_id))
        for site_id in supplier.linked_site_ids:
            suppliers_by_site[site_id].append(supplier.id)

    for director in directors:
        for supplier_id in director.board_positions:
            if supplier_id not in suppliers_by_id:
                dangling.append(DanglingReference(EntityKind.director, director.id, supplier_id))

    if dangling:
        if dangling_policy == "error":
            raise DataIntegrityError(
                f"{len(dangling)} dangling reference(s): " + "; ".join(d.describe() for d in dangling)
            )
        if dangling_policy == "warn":
            for ref in dangling:
                logger.warning(f"DATA_INTEGRITY: {ref.describe()}, reference skipped")

    return RelationshipIndex(
        suppliers=suppliers_by_id,
        directors=directors_by_id,
        suppliers_by_director=dict(suppliers_by_director),
        suppliers_by_site=dict(suppliers_by_site),
        dangling=dangling,
    )
