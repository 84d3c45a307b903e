"""Demo fixture loader."""

from datetime import datetime, timezone

from pymongo.database import Database

from realestate.core import database
from realestate.core.logging import get_logger
from realestate.models.owner import OwnerDocument
from realestate.models.property import (
    PropertyDocument,
    PropertyImageDocument,
    PropertyTraceDocument,
)
from realestate.repositories.common import utcnow
from realestate.schemas.seed import SeedResult

logger = get_logger(__name__)

PLACEHOLDER = "https://via.placeholder.com"


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def sample_owners() -> list[OwnerDocument]:
    return [
        OwnerDocument(
            id_owner="OWNER001",
            name="John Smith",
            address="123 Main Street, New York, NY 10001",
            photo=f"{PLACEHOLDER}/150x150?text=JS",
            birthday=_date(1980, 5, 15),
        ),
        OwnerDocument(
            id_owner="OWNER002",
            name="Sarah Johnson",
            address="456 Oak Avenue, Los Angeles, CA 90210",
            photo=f"{PLACEHOLDER}/150x150?text=SJ",
            birthday=_date(1975, 8, 22),
        ),
        OwnerDocument(
            id_owner="OWNER003",
            name="Michael Brown",
            address="789 Pine Road, Chicago, IL 60601",
            photo=f"{PLACEHOLDER}/150x150?text=MB",
            birthday=_date(1985, 12, 3),
        ),
        OwnerDocument(
            id_owner="OWNER004",
            name="Emily Davis",
            address="321 Elm Street, Miami, FL 33101",
            photo=f"{PLACEHOLDER}/150x150?text=ED",
            birthday=_date(1990, 3, 18),
        ),
    ]


def sample_properties() -> list[PropertyDocument]:
    rows = [
        (
            "PROP001",
            "Luxury Downtown Apartment",
            "100 Central Park West, New York, NY 10023",
            2_500_000,
            "NYC001",
            2020,
            "OWNER001",
        ),
        (
            "PROP002",
            "Modern Beach House",
            "500 Ocean Drive, Miami Beach, FL 33139",
            1_800_000,
            "MIA001",
            2019,
            "OWNER004",
        ),
        (
            "PROP003",
            "Victorian Family Home",
            "200 Maple Street, San Francisco, CA 94102",
            3_200_000,
            "SF001",
            1905,
            "OWNER002",
        ),
        (
            "PROP004",
            "Contemporary Loft",
            "150 Industrial Way, Chicago, IL 60622",
            850_000,
            "CHI001",
            2018,
            "OWNER003",
        ),
        (
            "PROP005",
            "Suburban Ranch House",
            "75 Willow Lane, Austin, TX 78701",
            650_000,
            "AUS001",
            2015,
            "OWNER001",
        ),
        (
            "PROP006",
            "Penthouse Suite",
            "888 Skyline Boulevard, Seattle, WA 98101",
            4_500_000,
            "SEA001",
            2021,
            "OWNER002",
        ),
    ]
    return [
        PropertyDocument(
            id_property=id_property,
            name=name,
            address=address,
            price=price,
            code_internal=code,
            year=year,
            id_owner=id_owner,
        )
        for id_property, name, address, price, code, year, id_owner in rows
    ]


def sample_images() -> list[PropertyImageDocument]:
    rows = [
        ("PROP001", "Luxury+Apartment", 2),
        ("PROP002", "Beach+House", 2),
        ("PROP003", "Victorian+Home", 2),
        ("PROP004", "Contemporary+Loft", 1),
        ("PROP005", "Ranch+House", 1),
        ("PROP006", "Penthouse", 3),
    ]
    images = []
    for id_property, label, count in rows:
        for n in range(1, count + 1):
            images.append(
                PropertyImageDocument(
                    id_property_image=f"IMG{len(images) + 1:03d}",
                    id_property=id_property,
                    file=f"{PLACEHOLDER}/800x600?text={label}+{n}",
                    enabled=True,
                )
            )
    return images


def sample_traces() -> list[PropertyTraceDocument]:
    rows = [
        ("PROP001", _date(2023, 6, 15), "Initial Purchase", 2_500_000, 125_000),
        ("PROP002", _date(2022, 3, 10), "Market Valuation", 1_800_000, 90_000),
        ("PROP003", _date(2023, 1, 20), "Renovation Assessment", 3_200_000, 160_000),
        ("PROP004", _date(2023, 8, 5), "Recent Sale", 850_000, 42_500),
        ("PROP005", _date(2023, 4, 12), "Property Assessment", 650_000, 32_500),
        ("PROP006", _date(2023, 9, 30), "Luxury Purchase", 4_500_000, 225_000),
    ]
    return [
        PropertyTraceDocument(
            id_property_trace=f"TRACE{n:03d}",
            id_property=id_property,
            date_sale=date_sale,
            name=name,
            value=value,
            tax=tax,
        )
        for n, (id_property, date_sale, name, value, tax) in enumerate(rows, start=1)
    ]


def seed_data(db: Database) -> SeedResult:
    """Insert the demo fixtures unless owners already exist."""
    if database.owners(db).count_documents({}) > 0:
        logger.info("seed_skipped", reason="owners already present")
        return SeedResult(skipped=True)

    now = utcnow()
    stamps = {"created_at": now, "updated_at": now}
    owners = [o.model_copy(update=stamps).to_mongo() for o in sample_owners()]
    properties = [p.model_copy(update=stamps).to_mongo() for p in sample_properties()]
    images = [i.to_mongo() for i in sample_images()]
    traces = [t.to_mongo() for t in sample_traces()]

    database.owners(db).insert_many(owners)
    database.properties(db).insert_many(properties)
    database.property_images(db).insert_many(images)
    database.property_traces(db).insert_many(traces)

    result = SeedResult(
        owners=len(owners),
        properties=len(properties),
        images=len(images),
        traces=len(traces),
    )
    logger.info("seed_completed", **result.model_dump())
    return result


def clear_data(db: Database) -> None:
    """Delete every document from the four collections."""
    database.property_traces(db).delete_many({})
    database.property_images(db).delete_many({})
    database.properties(db).delete_many({})
    database.owners(db).delete_many({})
    logger.info("data_cleared")
