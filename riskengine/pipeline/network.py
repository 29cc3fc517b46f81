"""Network effects: shared-director and site-cluster amplification for a supplier."""
from typing import Optional, Sequence

from riskengine.models.profile import SupplierRiskProfile
from riskengine.models.scoring_config import NetworkEffects
from riskengine.pipeline.index import RelationshipIndex, build_relationship_index

# Site cluster applies when more than this many peers share tier and site
GEO_CLUSTER_MIN_PEERS = 2


def calculate_network_effect(
    supplier: SupplierRiskProfile,
    all_suppliers: Sequence[SupplierRiskProfile],
    network_effects: NetworkEffects,
    index: Optional[RelationshipIndex] = None,
) -> tuple[float, list[str]]:
    """
    Detect network effects for a supplier against the whole supplier set.
    Returns (multiplier starting at 1.0, list of triggered rules).

    When index is given it takes precedence and all_suppliers is not read;
    callers holding an index may pass an empty sequence.
    """
    if index is None:
        index = build_relationship_index(all_suppliers, [], dangling_policy="skip")

    triggered = []
    multiplier = 1.0

    shared_peers = index.shared_director_peers(supplier)
    if shared_peers:
        multiplier *= network_effects.shared_director_multiplier
        triggered.append(
            f"NETWORK_SHARED_DIRECTOR: {len(shared_peers)} supplier(s) share directors with {supplier.id} "
            f"(x{network_effects.shared_director_multiplier})"
        )

    cluster_peers = index.site_cluster_peers(supplier)
    if len(cluster_peers) > GEO_CLUSTER_MIN_PEERS:
        multiplier *= network_effects.geographic_concentration_multiplier
        triggered.append(
            f"NETWORK_GEO_CLUSTER: {len(cluster_peers)} {supplier.geographic_risk.value}-risk supplier(s) "
            f"share sites with {supplier.id} (x{network_effects.geographic_concentration_multiplier})"
        )

    return multiplier, triggered


def count_shared_director_suppliers(supplier: SupplierRiskProfile, index: RelationshipIndex) -> int:
    return len(index.shared_director_peers(supplier))
