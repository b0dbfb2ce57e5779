"""Per-section-type documentation used to brief the section generator."""

SECTION_TYPE_INFO: dict[str, str] = {
    "hero": """HERO SECTION
Variants: default, animated-preview, email-signup, sales-funnel, glassmorphism-trust
Required: heading, subheading, buttonText, buttonLink
Optional: badge, heroImageUrl, brands[]
Best practices:
- Headline: 3-10 words, benefit-focused, power words
- Subheading: Under 20 words, expand on headline
- CTA: Action verb + specific outcome
- Badge: Social proof or urgency (e.g., "Trusted by 10,000+ teams")""",
    "features": """FEATURES SECTION
Variants: default, illustrated, hover, bento, table
Required: heading, items[]
Items need: title, description, icon or imageUrl
Best practices:
- 3-6 features optimal
- Benefit-focused titles, not feature names
- Short descriptions (1-2 sentences)
- Icons: use emoji or icon names like "Zap", "Shield", "Clock\"""",
    "testimonials": """TESTIMONIALS SECTION
Variants: scrolling, twitter-cards, screenshots
Required: heading, items[]
Items need: description (the quote), author, role, imageUrl
Best practices:
- 3-5 testimonials
- Include specific results when possible
- Real-sounding names and roles
- Diverse roles/companies""",
    "pricing": """PRICING SECTION
Required: heading, items[]
Items need: title, description, price, features[], buttonText, buttonLink
Optional: popular (boolean for highlighting)
Best practices:
- 2-3 pricing tiers
- Mark one as "popular" or "recommended"
- Clear CTA on each tier""",
    "cta": """CTA SECTION
Variants: centered, split, banner, minimal
Required: heading, buttonText, buttonLink
Optional: subheading, secondaryButtonText
Best practices:
- Strong action-oriented headline
- Single focused CTA
- Add urgency or guarantee""",
    "faq": """FAQ SECTION
Required: heading, items[]
Items need: title (question), description (answer)
Best practices:
- 5-8 questions
- Address common objections
- Include pricing/guarantee questions""",
    "stats": """STATS SECTION
Variants: cards, minimal, bars, circles
Required: heading, items[]
Items need: title (the number), description (what it means)
Best practices:
- 3-4 stats
- Use specific numbers
- Add context (e.g., "340% average increase")""",
    "process": """PROCESS SECTION
Variants: timeline, cards, horizontal
Required: heading, items[]
Items need: title, description, icon (step number or icon name)
Best practices:
- 3-5 steps maximum
- Simple, clear step names
- Logical progression""",
    "header": """HEADER SECTION
Variants: default, header-2, floating-header, simple-header, header-with-search
Required: links[], buttonText, buttonLink
Optional: logoUrl, logoText, searchPlaceholder
Best practices:
- 3-5 navigation links
- Clear CTA button""",
    "footer": """FOOTER SECTION
Required: links[]
Optional: logoUrl, logoText, tagline, socialLinks
Best practices:
- Organize links by category
- Include legal links""",
    "logoCloud": """LOGO CLOUD SECTION
Required: heading, brands[]
Brands: array of company names (e.g., ["Google", "Microsoft", "Stripe"])
Best practices:
- 5-8 recognizable brands
- Relevant to target audience""",
    "creator": """CREATOR SECTION
Required: creatorName, creatorRole, creatorBio, creatorPhotoUrl
Optional: creatorCredentials[]
Best practices:
- Relevant credentials
- Personal but professional bio
- Include achievements""",
    "comparison": """COMPARISON SECTION
Required: heading, items[]
Items: your product vs competitors
Best practices:
- 5-10 comparison points
- Highlight your advantages""",
    "value-proposition": """VALUE PROPOSITION SECTION
Required: heading, bodyParagraphs[]
Optional: painPoints[]
Best practices:
- Story-based structure
- Address pain points
- Build to solution""",
    "offer-details": """OFFER DETAILS SECTION
Required: heading, items[], featuredImageUrl
Items: what's included in the offer
Best practices:
- Detailed breakdown
- Value stacking""",
}


def generic_section_info(section_type: str) -> str:
    return (
        f"{section_type.upper()} SECTION\n"
        "Generate appropriate content for this section type.\n"
        "Required: heading\n"
        "Optional: subheading, items[], buttonText"
    )


# Variant the editor's presets use for each vibe
RECOMMENDED_VARIANTS: dict[str, dict[str, str]] = {
    "modern": {
        "hero": "default",
        "features": "bento",
        "testimonials": "twitter-cards",
        "header": "floating-header",
        "stats": "cards",
        "process": "horizontal",
    },
    "minimal": {
        "hero": "default",
        "features": "default",
        "testimonials": "scrolling",
        "header": "simple-header",
        "stats": "minimal",
        "process": "cards",
    },
    "bold": {
        "hero": "sales-funnel",
        "features": "hover",
        "testimonials": "twitter-cards",
        "header": "default",
        "stats": "bars",
        "process": "timeline",
    },
    "professional": {
        "hero": "default",
        "features": "illustrated",
        "testimonials": "scrolling",
        "header": "default",
        "stats": "cards",
        "process": "timeline",
    },
    "playful": {
        "hero": "animated-preview",
        "features": "hover",
        "testimonials": "twitter-cards",
        "header": "floating-header",
        "stats": "circles",
        "process": "horizontal",
    },
    "techy": {
        "hero": "animated-preview",
        "features": "bento",
        "testimonials": "twitter-cards",
        "header": "floating-header",
        "stats": "cards",
        "process": "horizontal",
    },
    "elegant": {
        "hero": "default",
        "features": "illustrated",
        "testimonials": "scrolling",
        "header": "simple-header",
        "stats": "minimal",
        "process": "timeline",
    },
}
