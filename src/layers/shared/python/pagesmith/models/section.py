"""Generated page section models.

Section content is a tagged union keyed by the section type: each type family
declares its own fields on top of the shared copy and color fields. Premium
presentation flags live in a separate ``styling`` map.
"""

from typing import Any

from pydantic import (
    ConfigDict,
    Field,
    SerializeAsAny,
    ValidationInfo,
    field_validator,
)

from pagesmith.models.base import CamelModel, generate_short_id

# Section types that are meaningless without at least one item
LIST_SECTION_TYPES = frozenset(
    {"features", "testimonials", "pricing", "faq", "stats", "process"}
)


class SectionItem(CamelModel):
    """One repeated entry inside a section (feature, quote, tier, step...)."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(default_factory=generate_short_id)
    title: str | None = None
    description: str | None = None


class SectionContent(CamelModel):
    """Fields shared by every section type.

    Unknown keys are kept; generators add section-specific fields freely.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    heading: str | None = None
    subheading: str | None = None
    body_text: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    background_color: str | None = None
    text_color: str | None = None
    accent_color: str | None = None


class HeroContent(SectionContent):
    badge: str | None = None
    hero_image_url: str | None = None
    brands: list[Any] = Field(default_factory=list)


class HeaderContent(SectionContent):
    links: list[Any] = Field(default_factory=list)
    logo_text: str | None = None
    logo_url: str | None = None
    search_placeholder: str | None = None


class FooterContent(SectionContent):
    links: list[Any] = Field(default_factory=list)
    logo_text: str | None = None
    tagline: str | None = None
    social_links: list[Any] = Field(default_factory=list)


class LogoCloudContent(SectionContent):
    brands: list[Any] = Field(default_factory=list)


class CreatorContent(SectionContent):
    creator_name: str | None = None
    creator_role: str | None = None
    creator_bio: str | None = None
    creator_photo_url: str | None = None
    creator_credentials: list[Any] = Field(default_factory=list)


class ValuePropositionContent(SectionContent):
    body_paragraphs: list[Any] = Field(default_factory=list)
    pain_points: list[Any] = Field(default_factory=list)


class OfferContent(SectionContent):
    featured_image_url: str | None = None


class CtaContent(SectionContent):
    secondary_button_text: str | None = None


CONTENT_MODELS: dict[str, type[SectionContent]] = {
    "hero": HeroContent,
    "header": HeaderContent,
    "footer": FooterContent,
    "logoCloud": LogoCloudContent,
    "creator": CreatorContent,
    "founders": CreatorContent,
    "value-proposition": ValuePropositionContent,
    "offer-details": OfferContent,
    "offer": OfferContent,
    "cta": CtaContent,
}


def content_model_for(section_type: str) -> type[SectionContent]:
    """Get the content model for a section type."""
    return CONTENT_MODELS.get(section_type, SectionContent)


class PageSection(CamelModel):
    """One generated, renderable section."""

    id: str = Field(default_factory=generate_short_id)
    type: str
    content: SerializeAsAny[SectionContent] = Field(default_factory=dict)
    items: list[SectionItem] = Field(default_factory=list)
    styling: dict[str, Any] = Field(default_factory=dict)

    @field_validator("content", mode="before")
    @classmethod
    def _content_for_type(cls, value: Any, info: ValidationInfo) -> Any:
        """Build the content model matching the section type."""
        model = content_model_for(info.data.get("type", ""))
        if isinstance(value, model):
            return value
        if isinstance(value, SectionContent):
            value = value.model_dump(by_alias=True, exclude_none=True)
        return model.model_validate(value or {})

    @field_validator("items", mode="before")
    @classmethod
    def _items_list(cls, value: Any) -> Any:
        return value or []

    @property
    def requires_items(self) -> bool:
        return self.type in LIST_SECTION_TYPES

    def to_editor_dict(self) -> dict[str, Any]:
        """Flatten into the editor's wire shape (styling merged into content)."""
        content = self.content.model_dump(mode="json", by_alias=True, exclude_none=True)
        content.update(self.styling)
        data: dict[str, Any] = {"id": self.id, "type": self.type, "content": content}
        if self.items:
            data["items"] = [
                item.model_dump(mode="json", by_alias=True, exclude_none=True)
                for item in self.items
            ]
        return data
