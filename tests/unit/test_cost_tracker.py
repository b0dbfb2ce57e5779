"""Tests for token cost accounting."""

from decimal import Decimal

from pagesmith.models.orchestration import TokenUsage
from pagesmith.services.cost_tracker import ModelPricing, calculate_cost


class TestCalculateCost:
    """Tests for calculate_cost."""

    def test_claude_pricing(self):
        """$3 / $15 per million tokens, rounded up to whole cents."""
        cost = calculate_cost(TokenUsage(input_tokens=10_000, output_tokens=2_000))

        # 3 cents input, 3 cents output
        assert cost.input_cost_cents == 3
        assert cost.output_cost_cents == 3
        assert cost.total_cost_cents == 6

    def test_rounds_up(self):
        cost = calculate_cost(TokenUsage(input_tokens=1, output_tokens=1))

        assert cost.input_cost_cents == 1
        assert cost.output_cost_cents == 1
        assert cost.total_cost_cents == 1

    def test_exact_cents_not_bumped(self):
        """Exact cent amounts stay exact."""
        cost = calculate_cost(TokenUsage(input_tokens=200_000, output_tokens=0))

        assert cost.input_cost_cents == 60
        assert cost.total_cost_cents == 60

    def test_zero_usage(self):
        assert calculate_cost(TokenUsage()).total_cost_cents == 0

    def test_custom_pricing(self):
        pricing = ModelPricing(input_per_million=Decimal("1"), output_per_million=Decimal("5"))

        cost = calculate_cost(TokenUsage(input_tokens=1_000_000, output_tokens=1_000_000), pricing)

        assert cost.total_cost_cents == 600
