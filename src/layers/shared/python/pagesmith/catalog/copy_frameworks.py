"""Copywriting frameworks (AIDA, PAS, BAB) and their stage guidance."""

from pagesmith.models.catalog import CopyFrameworkDefinition, FrameworkStage

AIDA = CopyFrameworkDefinition(
    id="AIDA",
    name="Attention, Interest, Desire, Action",
    description=(
        "Classic marketing framework that moves visitors through awareness stages. "
        "Best for products with clear benefits and established markets."
    ),
    stages=(
        FrameworkStage(
            name="Attention",
            sections=("hero", "header"),
            copy_guidelines="""ATTENTION STAGE - Grab attention immediately
Headlines should:
- Lead with the biggest benefit or transformation
- Use power words: Revolutionary, Effortless, Instant, Proven
- Include specific numbers when possible (10x, 3 hours, 47%)
- Create curiosity without being clickbait
- Address the reader directly ("You" language)

Examples:
- "Ship 10x Faster with AI-Powered Code Reviews"
- "The $50,000 Marketing Strategy Now Available for $47"
- "Finally: Email Marketing That Actually Gets Opened\"""",
        ),
        FrameworkStage(
            name="Interest",
            sections=("features", "stats", "process", "logoCloud", "video"),
            copy_guidelines="""INTEREST STAGE - Build understanding and engagement
Content should:
- Explain HOW the product delivers the promised benefit
- Use concrete examples and specifics
- Show process/methodology (builds confidence)
- Include proof points (stats, logos, metrics)
- Answer "How does this work?"

Headlines for this stage:
- "Here's How It Works"
- "The Simple 3-Step Process"
- "Trusted by 10,000+ Teams Worldwide\"""",
        ),
        FrameworkStage(
            name="Desire",
            sections=("testimonials", "comparison", "creator", "founders"),
            copy_guidelines="""DESIRE STAGE - Create emotional connection and want
Content should:
- Feature real customer success stories
- Show transformation (before/after)
- Build trust through credibility
- Address "people like me" identity
- Make them imagine using the product

Testimonial guidelines:
- Include specific results ("increased by 340%")
- Show diverse customer types
- Include job titles and company names
- Keep quotes conversational and authentic""",
        ),
        FrameworkStage(
            name="Action",
            sections=("cta", "pricing", "offer"),
            copy_guidelines="""ACTION STAGE - Drive conversion with clear next steps
Content should:
- Have ONE clear call to action
- Remove friction (free trial, no credit card)
- Add urgency when appropriate
- Include guarantee/risk reversal
- Make the action feel easy

CTA examples:
- "Start Your Free 14-Day Trial"
- "Get Instant Access Now"
- "Try It Free - No Credit Card Required\"""",
        ),
    ),
    section_mapping={
        "navigation": ("header",),
        "attention": ("hero",),
        "interest": ("features", "stats", "process", "logoCloud", "video"),
        "desire": ("testimonials", "comparison", "creator", "founders"),
        "action": ("cta", "pricing", "offer"),
        "proof": ("logoCloud", "stats", "testimonials"),
        "objections": ("faq",),
        "footer": ("footer",),
    },
    headlines="Bold, benefit-focused, specific. Use numbers and power words. Create curiosity.",
    subheadlines="Expand on the headline promise. Add context. Keep under 20 words.",
    ctas="Action verb + outcome. Examples: 'Start Free Trial', 'Get Instant Access', 'Join Now'",
    body_text="Benefit-first. Short paragraphs. Conversational but professional. Address objections.",
)

PAS = CopyFrameworkDefinition(
    id="PAS",
    name="Problem, Agitate, Solution",
    description=(
        "Framework that starts with the customer's pain point, intensifies it, then "
        "presents your product as the solution. Best for products solving specific problems."
    ),
    stages=(
        FrameworkStage(
            name="Problem",
            sections=("hero", "value-proposition"),
            copy_guidelines="""PROBLEM STAGE - Identify and name the pain
Headlines should:
- Acknowledge the specific problem they face
- Use their exact language/terminology
- Show you understand their situation
- Create "yes, that's me" recognition

Examples:
- "Tired of Losing Customers to Slow Response Times?"
- "Still Manually Processing Invoices?"
- "Your Website Visitors Are Leaving Without Converting\"""",
        ),
        FrameworkStage(
            name="Agitate",
            sections=("stats", "comparison", "features"),
            copy_guidelines="""AGITATE STAGE - Make the problem feel urgent
Content should:
- Quantify the cost of the problem
- Show what they're missing out on
- Create emotional urgency
- Reference competitors who solved this
- Make inaction feel painful

This stage should create urgency without being manipulative.""",
        ),
        FrameworkStage(
            name="Solution",
            sections=("features", "testimonials", "process", "cta", "pricing"),
            copy_guidelines="""SOLUTION STAGE - Present your product as the answer
Content should:
- Position your product as the relief
- Show the transformation possible
- Provide proof it works (testimonials, case studies)
- Make getting started easy
- Include clear next steps

CTAs should feel like relief from the problem.""",
        ),
    ),
    section_mapping={
        "navigation": ("header",),
        "attention": ("hero",),
        "interest": ("stats", "comparison", "features", "process"),
        "desire": ("testimonials", "creator"),
        "action": ("cta", "pricing", "offer"),
        "proof": ("stats", "testimonials"),
        "objections": ("faq",),
        "footer": ("footer",),
    },
    headlines="Problem-aware. Start with pain. Use 'frustrated', 'tired of', 'still struggling with'.",
    subheadlines="Intensify the problem or hint at the solution. Build tension.",
    ctas="Relief-focused. Examples: 'Solve This Now', 'End the Struggle', 'Fix It Today'",
    body_text="Empathetic. Show you understand. Then pivot to solution. Use before/after contrast.",
)

BAB = CopyFrameworkDefinition(
    id="BAB",
    name="Before, After, Bridge",
    description=(
        "Storytelling framework showing transformation. Before (current state) -> After "
        "(dream state) -> Bridge (your product). Best for transformation-based products."
    ),
    stages=(
        FrameworkStage(
            name="Before",
            sections=("hero", "audience"),
            copy_guidelines="""BEFORE STAGE - Paint the current painful reality
Headlines should:
- Describe their current struggling state
- Create recognition and empathy
- Use "you know the feeling" language
- Be specific about daily frustrations

Examples:
- "You're Working 60-Hour Weeks But Still Falling Behind"
- "Another Month, Another Failed Marketing Campaign\"""",
        ),
        FrameworkStage(
            name="After",
            sections=("features", "stats", "testimonials", "creator"),
            copy_guidelines="""AFTER STAGE - Show the transformed future
Content should:
- Paint a vivid picture of success
- Use sensory, emotional language
- Show real examples (testimonials)
- Make it feel achievable
- Create desire for this new reality

Testimonials should emphasize transformation, not just satisfaction.""",
        ),
        FrameworkStage(
            name="Bridge",
            sections=("process", "offer-details", "pricing", "cta"),
            copy_guidelines="""BRIDGE STAGE - Show the path from Before to After
Content should:
- Present your product as THE bridge
- Show simple, clear steps
- Remove complexity barriers
- Build confidence they can do it
- Make starting feel easy

Process sections are crucial here: they show HOW the transformation happens.""",
        ),
    ),
    section_mapping={
        "navigation": ("header",),
        "attention": ("hero",),
        "interest": ("features", "stats", "process", "offer-details"),
        "desire": ("testimonials", "creator", "audience"),
        "action": ("cta", "pricing", "offer"),
        "proof": ("testimonials", "stats"),
        "objections": ("faq",),
        "footer": ("footer",),
    },
    headlines="Transformation-focused. Paint current state or dream state. Use contrast.",
    subheadlines="Bridge the gap. Hint at how the transformation happens.",
    ctas="Journey-focused. Examples: 'Start My Transformation', 'Begin Your Journey', 'Get Started Today'",
    body_text=(
        "Story-driven. Before/after contrast. Use 'imagine', 'picture', 'what if'. "
        "Make transformation feel possible."
    ),
)

COPY_FRAMEWORKS: dict[str, CopyFrameworkDefinition] = {
    "AIDA": AIDA,
    "PAS": PAS,
    "BAB": BAB,
}

# Product types whose pages sell a transformation
TRANSFORMATION_PRODUCTS = ("course", "webinar", "coaching")
HIGH_TICKET_PRICES = ("premium", "enterprise")


def select_copy_framework(product_type: str, urgency_level: str, price_point: str) -> str:
    """Pick a copy framework from the intent's product, urgency and price."""
    if urgency_level == "high" or product_type == "ecommerce":
        return "PAS"
    if product_type in TRANSFORMATION_PRODUCTS:
        return "BAB"
    if price_point in HIGH_TICKET_PRICES:
        return "BAB"
    return "AIDA"


def section_copy_guidelines(
    definition: CopyFrameworkDefinition,
    section_type: str,
    purpose: str,
) -> str:
    """Copy guidance for one section under a framework.

    Uses the stage that lists the section type, or the framework's general
    rules when no stage does.
    """
    general = (
        f"Headlines: {definition.headlines}\n"
        f"Subheadlines: {definition.subheadlines}\n"
        f"CTAs: {definition.ctas}\n"
        f"Body text: {definition.body_text}"
    )

    stage = definition.stage_for(section_type)
    if stage:
        return (
            f"## {definition.id} Framework - {stage.name} Stage\n\n"
            f"{stage.copy_guidelines}\n\n"
            f"## General Copy Rules for {section_type} ({purpose})\n"
            f"{general}"
        )

    return f"## {definition.id} Framework Guidelines\n\n{general}"


def headline_examples(framework: str, purpose: str, keywords: list[str]) -> list[str]:
    """Stage-appropriate headline examples seeded with the intent keywords."""
    first = keywords[0] if keywords else None
    second = keywords[1] if len(keywords) > 1 else None

    examples: dict[str, dict[str, list[str]]] = {
        "AIDA": {
            "attention": [
                f"The {first or 'Solution'} That's Changing Everything",
                f"Finally: {first or 'Results'} Without the Hassle",
                f"10x Your {first or 'Output'} in Just 30 Days",
            ],
            "interest": ["Here's How It Works", "The Simple 3-Step Process", "Built for Results"],
            "desire": [
                "Join Thousands of Happy Customers",
                "See What Others Are Saying",
                "Real Results from Real People",
            ],
            "action": [
                "Start Your Free Trial Today",
                "Get Instant Access Now",
                "Ready to Transform Your Business?",
            ],
            "proof": ["Trusted by Industry Leaders", "The Numbers Speak"],
            "objections": ["Frequently Asked Questions", "Got Questions? We Have Answers"],
        },
        "PAS": {
            "attention": [
                f"Tired of {first or 'Struggling'}?",
                f"Still Dealing With {first or 'This Problem'}?",
                f"{first or 'This Problem'} Costing You Time and Money?",
            ],
            "interest": [
                "The Cost of Doing Nothing",
                "What You're Missing Out On",
                "Why Most Solutions Fail",
            ],
            "desire": [
                "There's a Better Way",
                "Finally, a Solution That Works",
                "See How Others Solved This",
            ],
            "action": ["End the Struggle Now", "Solve This Today", "Stop Losing Time and Money"],
            "proof": ["The Numbers Don't Lie", "See the Difference"],
            "objections": ["Your Questions, Answered"],
        },
        "BAB": {
            "attention": [
                f"From {first or 'Struggling'} to {second or 'Success'}",
                f"Imagine {first or 'Achieving Your Goals'}...",
                f"Ready to Transform Your {first or 'Results'}?",
            ],
            "interest": [
                "Picture Your Life With...",
                "What Success Looks Like",
                "The Transformation Awaits",
            ],
            "desire": [
                "They Did It. So Can You.",
                "Real Transformations, Real People",
                "Your Success Story Starts Here",
            ],
            "action": ["Start Your Journey Today", "Begin Your Transformation", "Take the First Step"],
            "proof": ["Success Stories", "Transformations That Inspire"],
            "objections": ["Everything You Need to Know"],
        },
    }

    return examples.get(framework, {}).get(purpose, [])
