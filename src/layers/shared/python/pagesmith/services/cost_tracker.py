"""Token cost accounting for generator usage."""

import math
from decimal import Decimal

from pydantic import ConfigDict

from pagesmith.models.base import CamelModel
from pagesmith.models.orchestration import TokenUsage

TOKENS_PER_MILLION = Decimal(1_000_000)


class ModelPricing(CamelModel):
    """USD per million tokens."""

    model_config = ConfigDict(frozen=True)

    input_per_million: Decimal
    output_per_million: Decimal


# Claude Sonnet 4.5
CLAUDE_PRICING = ModelPricing(input_per_million=Decimal("3.00"), output_per_million=Decimal("15.00"))


class CostResult(CamelModel):
    input_cost_cents: int
    output_cost_cents: int
    total_cost_cents: int


def _cents(dollars: Decimal) -> int:
    return math.ceil(dollars * 100)


def calculate_cost(usage: TokenUsage, pricing: ModelPricing = CLAUDE_PRICING) -> CostResult:
    """Cost of a usage total in whole cents, rounded up."""
    input_cost = Decimal(usage.input_tokens) * pricing.input_per_million / TOKENS_PER_MILLION
    output_cost = Decimal(usage.output_tokens) * pricing.output_per_million / TOKENS_PER_MILLION
    return CostResult(
        input_cost_cents=_cents(input_cost),
        output_cost_cents=_cents(output_cost),
        total_cost_cents=_cents(input_cost + output_cost),
    )
