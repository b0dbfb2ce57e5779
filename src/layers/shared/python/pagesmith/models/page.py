"""Assembled landing page handed to the editor and storage layers."""

from typing import Any, Literal

from pydantic import Field

from pagesmith.models.base import CamelModel
from pagesmith.models.blueprint import HEX_COLOR, ColorStrategy, Typography
from pagesmith.models.section import PageSection


class ColorScheme(CamelModel):
    """Page-level palette (a color strategy without mode or rationale)."""

    primary: str = Field(..., pattern=HEX_COLOR)
    secondary: str = Field(..., pattern=HEX_COLOR)
    accent: str = Field(..., pattern=HEX_COLOR)
    background: str = Field(..., pattern=HEX_COLOR)
    text: str = Field(..., pattern=HEX_COLOR)

    @classmethod
    def from_strategy(cls, strategy: ColorStrategy) -> "ColorScheme":
        return cls(
            primary=strategy.primary,
            secondary=strategy.secondary,
            accent=strategy.accent,
            background=strategy.background,
            text=strategy.text,
        )


class LandingPage(CamelModel):
    """A complete, structured, styled page."""

    title: str
    description: str
    sections: list[PageSection] = Field(default_factory=list)
    color_scheme: ColorScheme
    typography: Typography
    smooth_scroll: bool = True
    animation_preset: Literal["none", "subtle", "moderate", "dramatic"] = "moderate"
    content_width: str = "medium"
    design_canvas_width: int = 896

    def to_editor_dict(self) -> dict[str, Any]:
        """Serialize with sections flattened into the editor's wire shape."""
        data = self.model_dump(mode="json", by_alias=True, exclude={"sections"})
        data["sections"] = [section.to_editor_dict() for section in self.sections]
        return data
