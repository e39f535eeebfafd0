"""FastAPI server for Shipyard.

Provides an HTTP API for parsing printable ships and validating ships and
squadrons. Handlers only translate JSON; all rules live in the engine.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..engine.cost import cost_with_pilot, cost_without_pilot
from ..engine.squadron import validate_squadron
from ..engine.validation import get_upgrade_count_limit, validate_ship
from ..models.catalog import UPGRADES, ShipType
from ..models.ship import Ship, SquadronTrait
from ..utils.notation import coalesce_duplicate_upgrades
from ..utils.printable import format_weapon, parse_printable, printable_version
from .schemas.requests import (
    ParseShipRequest,
    ValidateShipRequest,
    ValidateSquadronRequest,
)
from .schemas.responses import (
    ErrorResponse,
    ShipReportResponse,
    SquadronReportResponse,
    UpgradeResponse,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info(f"Shipyard server starting ({len(UPGRADES)} upgrades in catalog)...")
    yield
    logger.info("Shipyard server shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Shipyard API",
    description="Cost and legality checks for starship squadrons",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {400: {"model": ErrorResponse}}


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Shipyard",
        "status": "operational",
        "upgrades": len(UPGRADES),
    }


@app.get("/api/upgrades", response_model=list[UpgradeResponse])
async def list_upgrades():
    """List the upgrade catalog in name order."""
    return [
        UpgradeResponse(
            name=u.name,
            shipTypes=sorted(t.value for t in u.classes),
            rarity=u.rarity.value,
            cost=u.cost,
            slots=u.slots,
        )
        for u in sorted(UPGRADES.values(), key=lambda u: u.name)
    ]


@app.post("/api/ships/parse", response_model=ShipReportResponse, responses=ERROR_RESPONSES)
async def parse_ship(request: ParseShipRequest):
    """Parse a printable line and report derived stats and costs.

    Example:
        POST /api/ships/parse
        {"printable": "Phoenix (snubfighter) 10 (13):2:2d6+1:2d6:2d8+1:Agile,Fast,Shields"}
    """
    ship = _parse_ship(request.printable)
    return _ship_report(ship, [])


@app.post("/api/ships/validate", response_model=ShipReportResponse, responses=ERROR_RESPONSES)
async def validate_single_ship(request: ValidateShipRequest):
    """Parse and validate a single ship."""
    ship = _parse_ship(request.printable)
    ship.squadron_trait = _parse_trait(request.squadronTrait)
    violations = validate_ship(ship)
    logger.info(f"Validated ship '{ship.name}': {len(violations)} violation(s)")
    return _ship_report(ship, violations)


@app.post(
    "/api/squadrons/validate", response_model=SquadronReportResponse, responses=ERROR_RESPONSES
)
async def validate_whole_squadron(request: ValidateSquadronRequest):
    """Validate every ship and the squadron as a whole.

    Each ship report carries its own rule violations followed by any
    squadron rarity violations that apply to it.
    """
    trait = _parse_trait(request.squadronTrait)
    ships = [_parse_ship(line) for line in request.ships]
    for ship in ships:
        ship.squadron_trait = trait

    squadron_violations, rarity_violations = validate_squadron(ships)
    reports = [
        _ship_report(ship, validate_ship(ship) + rarity)
        for ship, rarity in zip(ships, rarity_violations)
    ]
    valid = not squadron_violations and all(not r.violations for r in reports)
    logger.info(
        f"Validated squadron of {len(ships)} ships: "
        f"{'valid' if valid else f'{len(squadron_violations)} squadron violation(s)'}"
    )

    return SquadronReportResponse(
        valid=valid,
        totalCost=sum(r.costWithPilot for r in reports),
        squadronViolations=squadron_violations,
        ships=reports,
    )


def _parse_ship(printable: str) -> Ship:
    """Parse a printable line, rejecting upgrades missing from the catalog."""
    ship = parse_printable(printable)
    unknown = [name for name in ship.upgrades if name not in UPGRADES]
    if unknown:
        logger.warning(f"Rejected ship '{ship.name}': unknown upgrades {unknown}")
        raise HTTPException(
            status_code=400, detail=f"Unknown upgrade(s): {', '.join(unknown)}"
        )
    return ship


def _parse_trait(value: str | None) -> SquadronTrait | None:
    if value is None:
        return None
    try:
        return SquadronTrait(value.strip().upper())
    except ValueError:
        logger.warning(f"Rejected unknown squadron trait '{value}'")
        raise HTTPException(status_code=400, detail=f"Unknown squadron trait: {value}")


def _ship_report(ship: Ship, violations: list[str]) -> ShipReportResponse:
    known_type = isinstance(ship.ship_type, ShipType)
    return ShipReportResponse(
        name=ship.name,
        shipType=ship.ship_type.value if known_type else str(ship.ship_type),
        speed=ship.speed,
        defense=str(ship.defense) if ship.defense else None,
        weapons=[format_weapon(w) for w in ship.weapons],
        pilot=str(ship.pilot) if ship.pilot else None,
        upgrades=coalesce_duplicate_upgrades(ship.upgrades),
        costWithoutPilot=cost_without_pilot(ship),
        costWithPilot=cost_with_pilot(ship),
        upgradeLimit=get_upgrade_count_limit(ship) if known_type else None,
        printable=printable_version(ship),
        violations=violations,
    )
