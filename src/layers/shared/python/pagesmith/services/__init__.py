"""Page generation pipeline services."""

from pagesmith.services.blueprint_planner import BlueprintPlanner
from pagesmith.services.cost_tracker import CostResult, calculate_cost
from pagesmith.services.generator import BedrockGenerator, Generator, GeneratorResponse
from pagesmith.services.intent_analyzer import IntentAnalyzer
from pagesmith.services.orchestrator import PageOrchestrator, generate_landing_page
from pagesmith.services.parsing import ContractParseError, ParseResult
from pagesmith.services.quality_validator import assess_quality, validate_and_refine
from pagesmith.services.section_generator import SectionGenerator

__all__ = [
    "BedrockGenerator",
    "BlueprintPlanner",
    "ContractParseError",
    "CostResult",
    "Generator",
    "GeneratorResponse",
    "IntentAnalyzer",
    "PageOrchestrator",
    "ParseResult",
    "SectionGenerator",
    "assess_quality",
    "calculate_cost",
    "generate_landing_page",
    "validate_and_refine",
]
