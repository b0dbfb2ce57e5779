"""Page intent model produced by the intent analysis phase."""

from enum import Enum

from pydantic import ConfigDict, Field

from pagesmith.models.base import CamelModel


class ProductType(str, Enum):
    """What kind of offer the page sells."""

    SAAS = "saas"
    COURSE = "course"
    ECOMMERCE = "ecommerce"
    AGENCY = "agency"
    LEADMAGNET = "leadmagnet"
    WEBINAR = "webinar"
    GENERAL = "general"


class Tone(str, Enum):
    """Voice of the page copy."""

    PROFESSIONAL = "professional"
    CASUAL = "casual"
    URGENT = "urgent"
    PLAYFUL = "playful"
    TECHNICAL = "technical"
    ASPIRATIONAL = "aspirational"


class UrgencyLevel(str, Enum):
    """How much pressure the copy should apply."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PricePoint(str, Enum):
    """Price positioning inferred from the request."""

    FREE = "free"
    LOW = "low"
    MEDIUM = "medium"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class PageIntent(CamelModel):
    """Normalized understanding of a page request.

    Created once per run and read by every later phase.
    """

    model_config = ConfigDict(frozen=True)

    product_type: ProductType = ProductType.GENERAL
    target_audience: str = "potential customers"
    primary_value_prop: str
    secondary_value_props: list[str] = Field(default_factory=list)
    tone: Tone = Tone.PROFESSIONAL
    urgency_level: UrgencyLevel = UrgencyLevel.MEDIUM
    price_point: PricePoint = PricePoint.MEDIUM
    keywords: list[str] = Field(default_factory=list)
    competitor_context: str | None = None
    unique_differentiator: str | None = None
