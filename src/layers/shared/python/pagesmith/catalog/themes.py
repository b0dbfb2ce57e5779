"""Color strategies and font pairings selectable from the wizard."""

from pagesmith.models.blueprint import ColorStrategy, Typography

DEFAULT_THEME = "dark"
DEFAULT_FONT_PAIR = "inter-inter"

COLOR_SCHEMES: dict[str, ColorStrategy] = {
    "dark": ColorStrategy(
        mode="dark",
        primary="#D6FC51",
        secondary="#a3c941",
        accent="#D6FC51",
        background="#0a0a0a",
        text="#ffffff",
        psychology="Bold, modern, tech-forward",
    ),
    "light": ColorStrategy(
        mode="light",
        primary="#3b82f6",
        secondary="#60a5fa",
        accent="#f59e0b",
        background="#ffffff",
        text="#111827",
        psychology="Clean, trustworthy, professional",
    ),
    "midnight": ColorStrategy(
        mode="dark",
        primary="#818cf8",
        secondary="#6366f1",
        accent="#a78bfa",
        background="#0f172a",
        text="#f1f5f9",
        psychology="Premium, sophisticated, tech",
    ),
    "forest": ColorStrategy(
        mode="dark",
        primary="#22c55e",
        secondary="#16a34a",
        accent="#a3e635",
        background="#052e16",
        text="#f0fdf4",
        psychology="Growth, natural, sustainable",
    ),
    "ocean": ColorStrategy(
        mode="dark",
        primary="#06b6d4",
        secondary="#0891b2",
        accent="#2dd4bf",
        background="#083344",
        text="#ecfeff",
        psychology="Calm, trustworthy, professional",
    ),
    "sunset": ColorStrategy(
        mode="dark",
        primary="#f97316",
        secondary="#fb923c",
        accent="#facc15",
        background="#1c1917",
        text="#fef3c7",
        psychology="Warm, energetic, creative",
    ),
}

FONT_PAIRS: dict[str, Typography] = {
    "anton-inter": Typography(heading_font="Anton", body_font="Inter"),
    "playfair-inter": Typography(heading_font="Playfair Display", body_font="Inter"),
    "space-grotesk-inter": Typography(heading_font="Space Grotesk", body_font="Inter"),
    "poppins-inter": Typography(heading_font="Poppins", body_font="Inter"),
    "inter-inter": Typography(heading_font="Inter", body_font="Inter"),
}
