"""
Material and profile catalog with fallback chain:
1. Entries from the JSON files named by MATERIAL_CATALOG_PATH / PROFILE_CATALOG_PATH
2. Built-in tables from weights.py

A Catalog is read-only once built. Pass a custom one into WeightEngine to
weigh against a different material or profile set (tests do this).
"""

import json
import logging
from types import MappingProxyType
from typing import Optional

from .weights import MATERIALS, PROFILE_WEIGHTS, PROFILE_FAMILIES

logger = logging.getLogger(__name__)


def _load_json(path: str) -> dict:
    if not path:
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load catalog file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Catalog file %s must contain a JSON object, ignoring", path)
        return {}
    logger.info("Loaded %d catalog entries from %s", len(data), path)
    return data


def _material_entry(key: str, value) -> Optional[dict]:
    """Accept either a bare density or {"density": ..., "names": {...}}."""
    if isinstance(value, dict):
        density = value.get("density")
        names = dict(value.get("names") or {})
    else:
        density = value
        names = {}
    try:
        density = float(density)
    except (ValueError, TypeError):
        density = 0.0
    if density <= 0:
        logger.warning("Dropping material %s: density must be > 0, got %r", key, value)
        return None
    return {"density": density, "names": names}


class Catalog:
    """Read-only lookup over material densities and profile linear masses."""

    def __init__(self, materials: dict = None, profiles: dict = None, families: dict = None):
        cleaned = {}
        for key, value in (MATERIALS if materials is None else materials).items():
            entry = _material_entry(key, value)
            if entry is not None:
                entry["names"] = MappingProxyType(entry["names"])
                cleaned[key] = MappingProxyType(entry)
        self.materials = MappingProxyType(cleaned)

        weights = {}
        for key, value in (PROFILE_WEIGHTS if profiles is None else profiles).items():
            try:
                kg_per_m = float(value)
            except (ValueError, TypeError):
                kg_per_m = 0.0
            if kg_per_m <= 0:
                logger.warning("Dropping profile %s: linear mass must be > 0, got %r", key, value)
                continue
            weights[str(key).strip()] = kg_per_m
        self.profiles = MappingProxyType(weights)
        self.families = MappingProxyType(dict(PROFILE_FAMILIES if families is None else families))

    @classmethod
    def from_settings(cls, settings=None) -> "Catalog":
        """Built-in tables with any configured JSON overrides merged on top."""
        if settings is None:
            from .config import settings
        materials = dict(MATERIALS)
        materials.update(_load_json(settings.MATERIAL_CATALOG_PATH))
        profiles = dict(PROFILE_WEIGHTS)
        profiles.update(_load_json(settings.PROFILE_CATALOG_PATH))
        return cls(materials=materials, profiles=profiles)

    def get_density(self, material: str) -> float:
        """Density in g/cm³, or 0.0 for an unknown material."""
        entry = self.materials.get(material)
        if entry is None:
            return 0.0
        return entry["density"]

    def has_material(self, material: str) -> bool:
        return material in self.materials

    def material_name(self, material: str, language: str = "en") -> str:
        entry = self.materials.get(material)
        if entry is None:
            return material
        names = entry["names"]
        return names.get(language) or names.get("en") or material

    def get_profile_weight(self, designation: str) -> float:
        """Linear mass in kg/m for an exact designation, or 0.0 if unknown."""
        if designation is None:
            return 0.0
        return self.profiles.get(str(designation).strip(), 0.0)

    def has_profile(self, designation: str) -> bool:
        return designation is not None and str(designation).strip() in self.profiles

    def profile_sizes(self, family: str) -> list:
        """Designations of a family in catalog order, e.g. profile_sizes('hea')."""
        if family not in self.families:
            return []
        prefix = self.families[family][1] + " "
        return [d for d in self.profiles if d.startswith(prefix)]
