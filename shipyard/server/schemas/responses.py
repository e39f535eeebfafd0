"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class UpgradeResponse(BaseModel):
    """Upgrade catalog entry."""

    name: str
    shipTypes: list[str]  # noqa: N815
    rarity: str
    cost: int
    slots: int


class ShipReportResponse(BaseModel):
    """A parsed ship with its derived stats, costs and violations."""

    name: str
    shipType: str  # noqa: N815
    speed: int
    defense: str | None
    weapons: list[str]
    pilot: str | None
    upgrades: list[str]  # Coalesced ("Enhanced Turret x2")
    costWithoutPilot: int  # noqa: N815
    costWithPilot: int  # noqa: N815
    upgradeLimit: int | None  # noqa: N815
    printable: str
    violations: list[str] = Field(default_factory=list)


class SquadronReportResponse(BaseModel):
    """Squadron-wide violations plus one report per ship."""

    valid: bool
    totalCost: int  # noqa: N815
    squadronViolations: list[str] = Field(default_factory=list)  # noqa: N815
    ships: list[ShipReportResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned with 400 responses."""

    detail: str
