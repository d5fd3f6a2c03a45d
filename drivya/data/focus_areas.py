"""Controlled focus-area taxonomy offered to organizations and search filters."""

from __future__ import annotations

from drivya.schemas.metadata import FocusArea

FOCUS_AREAS: list[FocusArea] = [
    FocusArea(id="fa-001", name="Education", icon="book", description="Education and learning programs"),
    FocusArea(id="fa-002", name="Health", icon="heart", description="Healthcare and wellness initiatives"),
    FocusArea(id="fa-003", name="Environment", icon="leaf", description="Climate and environmental conservation"),
    FocusArea(id="fa-004", name="Technology", icon="code", description="Technology and digital innovation"),
    FocusArea(id="fa-005", name="Livelihood", icon="briefcase", description="Economic development and employment"),
    FocusArea(id="fa-006", name="Governance", icon="building", description="Governance and policy advocacy"),
    FocusArea(id="fa-007", name="Water & Sanitation", icon="droplet", description="Water and sanitation access"),
    FocusArea(id="fa-008", name="Agriculture", icon="sprout", description="Agricultural development and sustainability"),
    FocusArea(id="fa-009", name="Women Empowerment", icon="star", description="Gender equality and women rights"),
    FocusArea(id="fa-010", name="Disability", icon="accessibility", description="Disability rights and accessibility"),
]
