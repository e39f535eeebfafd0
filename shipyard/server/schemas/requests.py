"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class ParseShipRequest(BaseModel):
    """Request to parse a single printable ship line."""

    printable: str = Field(
        min_length=1,
        description="Printable ship line, e.g. 'Phoenix (snubfighter) 10 (13):2:2d6:2d6:2d8:Agile'",
    )


class ValidateShipRequest(ParseShipRequest):
    """Request to validate a single ship."""

    squadronTrait: str | None = Field(  # noqa: N815
        default=None, description="Optional squadron trait, e.g. 'HIGH_TECH'"
    )


class ValidateSquadronRequest(BaseModel):
    """Request to validate a whole squadron."""

    ships: list[str] = Field(description="Printable ship lines in squadron order")
    squadronTrait: str | None = Field(  # noqa: N815
        default=None, description="Optional squadron trait applied to every ship"
    )
