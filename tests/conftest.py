"""Shared fixtures: a 13-supplier / 10-director mining supply portfolio."""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from riskengine.models.profile import DirectorRiskProfile, SupplierRiskProfile


def _factors(operational, financial, compliance, reputational, contractual):
    return {"operational": operational, "financial": financial, "compliance": compliance,
            "reputational": reputational, "contractual": contractual}


DIRECTORS = [
    {"id": "DIR_01", "name": "Jabulani Zuma", "board_positions": ["SUP_101", "SUP_104"],
     "years_experience": 12, "has_adverse_media": True, "compliance_history": "minor"},
    {"id": "DIR_02", "name": "Pieter van der Merwe", "board_positions": ["SUP_102", "SUP_105"],
     "years_experience": 18, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_03", "name": "Naledi Molefe", "board_positions": ["SUP_201", "SUP_203"],
     "years_experience": 8, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_04", "name": "Sipho Ndlovu", "board_positions": ["SUP_101", "SUP_102", "SUP_103", "SUP_104"],
     "years_experience": 15, "has_adverse_media": True, "compliance_history": "minor"},
    {"id": "DIR_05", "name": "Liam O'Connell", "board_positions": ["SUP_105", "SUP_202"],
     "years_experience": 22, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_06", "name": "Fatima Khan", "board_positions": ["SUP_201", "SUP_202", "SUP_203"],
     "years_experience": 10, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_07", "name": "Thabo Mthembu", "board_positions": ["SUP_301", "SUP_303"],
     "years_experience": 14, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_08", "name": "Sarah Mitchell", "board_positions": ["SUP_302", "SUP_303"],
     "years_experience": 16, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_09", "name": "Ahmed Hassan", "board_positions": ["SUP_401"],
     "years_experience": 6, "has_adverse_media": False, "compliance_history": "clean"},
    {"id": "DIR_10", "name": "Nomsa Dlamini", "board_positions": ["SUP_402"],
     "years_experience": 9, "has_adverse_media": False, "compliance_history": "clean"},
]

SUPPLIERS = [
    # High risk cluster, North West
    {"id": "SUP_101", "name": "Rustenburg Explosives Inc.", "base_risk_factors": _factors(90, 65, 85, 70, 60),
     "contract_value_zar": 50_000_000, "director_ids": ["DIR_01", "DIR_04"], "category": "Explosives & Chemicals",
     "geographic_risk": "high", "linked_site_ids": ["MS_01", "MS_02"]},
    {"id": "SUP_102", "name": "Marikana Heavy Machinery Lease", "base_risk_factors": _factors(70, 80, 65, 85, 70),
     "contract_value_zar": 75_000_000, "director_ids": ["DIR_02", "DIR_04"], "category": "Heavy Machinery",
     "geographic_risk": "high", "linked_site_ids": ["MS_01", "MS_02"]},
    {"id": "SUP_103", "name": "Limpopo Logistix", "base_risk_factors": _factors(85, 60, 70, 50, 65),
     "contract_value_zar": 30_000_000, "director_ids": ["DIR_04", "DIR_06"], "category": "Logistics & Transportation",
     "geographic_risk": "high", "linked_site_ids": ["MS_01", "MS_03"]},
    {"id": "SUP_104", "name": "North West Mining Supplies", "base_risk_factors": _factors(75, 65, 80, 55, 70),
     "contract_value_zar": 45_000_000, "director_ids": ["DIR_01", "DIR_04"], "category": "Mining Supplies",
     "geographic_risk": "high", "linked_site_ids": ["MS_01", "MS_02"]},
    {"id": "SUP_105", "name": "Platinum Province Chemicals", "base_risk_factors": _factors(80, 70, 90, 60, 65),
     "contract_value_zar": 65_000_000, "director_ids": ["DIR_02", "DIR_05"], "category": "Chemicals",
     "geographic_risk": "high", "linked_site_ids": ["MS_01", "MS_02"]},
    # Medium risk cluster, Gauteng
    {"id": "SUP_201", "name": "Gauteng Gold Refiners", "base_risk_factors": _factors(60, 55, 65, 70, 50),
     "contract_value_zar": 120_000_000, "director_ids": ["DIR_03", "DIR_06"], "category": "Gold Refining",
     "geographic_risk": "medium", "linked_site_ids": ["MS_03", "MS_04"]},
    {"id": "SUP_202", "name": "West Rand Water Purification", "base_risk_factors": _factors(45, 50, 55, 40, 45),
     "contract_value_zar": 25_000_000, "director_ids": ["DIR_05", "DIR_06"], "category": "Water Treatment",
     "geographic_risk": "medium", "linked_site_ids": ["MS_03", "MS_04"]},
    {"id": "SUP_203", "name": "Johannesburg Engineering Services", "base_risk_factors": _factors(40, 45, 50, 35, 40),
     "contract_value_zar": 85_000_000, "director_ids": ["DIR_03", "DIR_06"], "category": "Engineering Services",
     "geographic_risk": "medium", "linked_site_ids": ["MS_03", "MS_04"]},
    # Low risk cluster, Free State
    {"id": "SUP_301", "name": "Welkom Safety Gear Pty Ltd", "base_risk_factors": _factors(20, 25, 30, 15, 20),
     "contract_value_zar": 15_000_000, "director_ids": ["DIR_07"], "category": "Safety Equipment",
     "geographic_risk": "low", "linked_site_ids": ["MS_05"]},
    {"id": "SUP_302", "name": "Free State Catering Co.", "base_risk_factors": _factors(25, 30, 20, 25, 25),
     "contract_value_zar": 8_000_000, "director_ids": ["DIR_08"], "category": "Catering Services",
     "geographic_risk": "low", "linked_site_ids": ["MS_05"]},
    {"id": "SUP_303", "name": "Free State Transportation Hub", "base_risk_factors": _factors(35, 30, 25, 20, 30),
     "contract_value_zar": 18_000_000, "director_ids": ["DIR_07", "DIR_08"], "category": "Transportation",
     "geographic_risk": "low", "linked_site_ids": ["MS_05"]},
    # Isolated
    {"id": "SUP_401", "name": "Cape Town Tech Solutions", "base_risk_factors": _factors(40, 35, 30, 25, 35),
     "contract_value_zar": 22_000_000, "director_ids": ["DIR_09"], "category": "IT Services",
     "geographic_risk": "medium", "linked_site_ids": ["MS_06"]},
    {"id": "SUP_402", "name": "Independent Security Services", "base_risk_factors": _factors(55, 45, 60, 40, 50),
     "contract_value_zar": 38_000_000, "director_ids": ["DIR_10"], "category": "Security Services",
     "geographic_risk": "medium", "linked_site_ids": ["MS_06"]},
]


@pytest.fixture
def suppliers():
    return [SupplierRiskProfile.model_validate(s) for s in SUPPLIERS]


@pytest.fixture
def directors():
    return [DirectorRiskProfile.model_validate(d) for d in DIRECTORS]


@pytest.fixture
def make_supplier():
    def _make(supplier_id, factors=(50, 50, 50, 50, 50), **kwargs):
        data = {"id": supplier_id, "base_risk_factors": _factors(*factors)}
        data.update(kwargs)
        return SupplierRiskProfile.model_validate(data)
    return _make


@pytest.fixture
def make_director():
    def _make(director_id, **kwargs):
        return DirectorRiskProfile.model_validate({"id": director_id, **kwargs})
    return _make
