"""Organization records and the schemas built on them.

Stored records are validated leniently: missing collections become empty
lists and missing scalars take their least favourable value, so every record
the directory hands out can be scored. Submissions go through the strict
``OrganizationSubmission`` schema instead.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, HttpUrl, field_validator


class OrganizationType(str, Enum):
    NGO = "NGO"
    FOUNDATION = "Foundation"
    INCUBATOR = "Incubator"
    CSR = "CSR"
    SOCIAL_ENTERPRISE = "Social Enterprise"


class FundingType(str, Enum):
    GRANT = "grant"
    PROVIDER = "provider"
    RECIPIENT = "recipient"
    MIXED = "mixed"


class VerificationStatus(str, Enum):
    VERIFIED = "verified"
    UNVERIFIED = "unverified"
    PENDING = "pending"


def _coerce_choice(value: Any, choices: type[Enum], default: Enum | None) -> Enum | None:
    """Map a raw value onto an enum member, falling back to ``default``."""
    if isinstance(value, choices):
        return value
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        return default
    wanted = value.strip().casefold()
    for member in choices:
        if member.value.casefold() == wanted:
            return member
    return default


def _coerce_labels(value: Any) -> list[str]:
    """Turn a raw label collection into a list of distinct non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    try:
        items = list(value)
    except TypeError:
        return []
    labels: list[str] = []
    for item in items:
        if isinstance(item, str) and item.strip() and item not in labels:
            labels.append(item)
    return labels


def _coerce_confidence(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(min(100, max(0, math.floor(number + 0.5))))


class Project(BaseModel):
    """A past or current project listed on an organization profile."""

    title: str = ""
    year: int | None = None
    description: str = ""


class Organization(BaseModel):
    """A directory record for one organization."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = ""
    type: OrganizationType | None = None
    website: str = ""
    headquarters: str = ""
    region: str = ""
    focus_areas: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("focus_areas", "focusAreas"),
    )
    mission: str = ""
    description: str = ""
    verification_status: VerificationStatus = Field(
        default=VerificationStatus.UNVERIFIED,
        validation_alias=AliasChoices("verification_status", "verificationStatus"),
    )
    projects: list[Project] = Field(default_factory=list)
    funding_type: FundingType | None = Field(
        default=None,
        validation_alias=AliasChoices("funding_type", "fundingType"),
    )
    target_beneficiaries: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("target_beneficiaries", "targetBeneficiaries"),
    )
    partner_history: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("partner_history", "partnerHistory"),
    )
    confidence: int = 0

    @field_validator("name", "website", "headquarters", "region", "mission", "description", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _known_type(cls, value: Any) -> OrganizationType | None:
        return _coerce_choice(value, OrganizationType, None)

    @field_validator("funding_type", mode="before")
    @classmethod
    def _known_funding_type(cls, value: Any) -> FundingType | None:
        return _coerce_choice(value, FundingType, None)

    @field_validator("verification_status", mode="before")
    @classmethod
    def _known_verification(cls, value: Any) -> VerificationStatus:
        return _coerce_choice(value, VerificationStatus, VerificationStatus.UNVERIFIED)

    @field_validator("focus_areas", "target_beneficiaries", "partner_history", mode="before")
    @classmethod
    def _labels(cls, value: Any) -> list[str]:
        return _coerce_labels(value)

    @field_validator("projects", mode="before")
    @classmethod
    def _project_entries(cls, value: Any) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        return [p for p in value if isinstance(p, (dict, Project))]

    @field_validator("confidence", mode="before")
    @classmethod
    def _bounded_confidence(cls, value: Any) -> int:
        return _coerce_confidence(value)

    @property
    def is_verified(self) -> bool:
        return self.verification_status is VerificationStatus.VERIFIED


class OrganizationWithScore(Organization):
    """An organization annotated with its alignment score."""

    alignment_score: int = Field(..., ge=0, le=100)


class OrganizationListResponse(BaseModel):
    organizations: list[OrganizationWithScore]
    total: int


class OrganizationSubmission(BaseModel):
    """Payload for registering or editing an organization."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    type: OrganizationType
    website: HttpUrl | None = None
    headquarters: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    focus_areas: list[str] = Field(..., min_length=1, alias="focusAreas")
    mission: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    funding_type: FundingType = Field(default=FundingType.MIXED, alias="fundingType")
    target_beneficiaries: list[str] = Field(default_factory=list, alias="targetBeneficiaries")
    partner_history: list[str] = Field(default_factory=list, alias="partnerHistory")
    projects: list[Project] = Field(default_factory=list)

    @field_validator("website", mode="before")
    @classmethod
    def _blank_website(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("name", "headquarters", "region", "mission", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("focus_areas")
    @classmethod
    def _distinct_focus_areas(cls, value: list[str]) -> list[str]:
        labels = _coerce_labels(value)
        if not labels:
            raise ValueError("at least one focus area is required")
        return labels

    def to_record(
        self,
        org_id: str,
        verification_status: VerificationStatus,
        confidence: int,
    ) -> Organization:
        """Build the directory record for this submission."""
        data = self.model_dump(exclude={"website"})
        data["website"] = str(self.website) if self.website else ""
        return Organization(
            id=org_id,
            verification_status=verification_status,
            confidence=confidence,
            **data,
        )


class VerificationUpdate(BaseModel):
    """Admin change to an organization's verification state."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    verification_status: VerificationStatus = Field(..., alias="verificationStatus")
    confidence: int | None = Field(default=None, ge=0, le=100)


def coerce_organization(value: Organization | dict[str, Any]) -> Organization:
    """Return ``value`` as an ``Organization``, normalising raw mappings."""
    if isinstance(value, Organization):
        return value
    return Organization.model_validate(value)
