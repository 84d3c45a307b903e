"""Fixture loading schemas."""

from realestate.schemas.common import ApiModel


class SeedResult(ApiModel):
    """Counts of documents inserted by a seeding run."""

    skipped: bool = False
    owners: int = 0
    properties: int = 0
    images: int = 0
    traces: int = 0


class SeedResponse(SeedResult):
    """Seeding result with a status message."""

    message: str
