"""Typed records shaped from CMS documents."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from .exceptions import ContentShapeError

ALL_CATEGORIES = "all"

UNKNOWN_TOOL_NAME = "Unknown Tool"


class ProjectCategory(StrEnum):
    """Fixed marketing categories a project can belong to."""

    SOCIAL_MEDIA_MARKETING = "social-media-marketing"
    SEO = "seo"
    BUSINESS_CONSULTATION = "business-consultation"
    PPC = "ppc"
    BRANDING_AND_DESIGN = "branding-and-design"
    WEB_DESIGN_AND_DEVELOPMENT = "web-design-and-development"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[ProjectCategory, str] = {
    ProjectCategory.SOCIAL_MEDIA_MARKETING: "Social Media Marketing",
    ProjectCategory.SEO: "SEO",
    ProjectCategory.BUSINESS_CONSULTATION: "Business Consultation",
    ProjectCategory.PPC: "PPC",
    ProjectCategory.BRANDING_AND_DESIGN: "Branding and Design",
    ProjectCategory.WEB_DESIGN_AND_DEVELOPMENT: "Web Design and Development",
}


@dataclass(frozen=True)
class Crop:
    """Editor crop, as fractions of the source image trimmed from each edge."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def parse(cls, raw) -> "Crop | None":
        if not isinstance(raw, dict):
            return None
        return cls(
            top=float(raw.get("top") or 0),
            bottom=float(raw.get("bottom") or 0),
            left=float(raw.get("left") or 0),
            right=float(raw.get("right") or 0),
        )


@dataclass(frozen=True)
class Hotspot:
    """Editor focus area: centre point and size, as fractions of the source image."""

    x: float = 0.5
    y: float = 0.5
    width: float = 1.0
    height: float = 1.0

    @classmethod
    def parse(cls, raw) -> "Hotspot | None":
        if not isinstance(raw, dict):
            return None
        return cls(
            x=float(raw.get("x", 0.5)),
            y=float(raw.get("y", 0.5)),
            width=float(raw.get("width", 1.0)),
            height=float(raw.get("height", 1.0)),
        )


@dataclass(frozen=True)
class ImageRef:
    """Opaque reference to an image asset in the content store.

    ``crop`` and ``hotspot`` carry the editor's framing when the image field
    has one; the URL builder turns them into a source rectangle.
    """

    ref: str
    alt: str = ""
    crop: Crop | None = None
    hotspot: Hotspot | None = None

    @classmethod
    def parse(cls, raw) -> "ImageRef | None":
        """Build a reference from a CMS image field, or None if it carries no asset."""
        if not raw:
            return None
        if isinstance(raw, str):
            return cls(ref=raw)
        asset = raw.get("asset") or raw
        ref = asset.get("_ref") or asset.get("_id")
        if not ref:
            return None
        return cls(
            ref=ref,
            alt=raw.get("alt") or "",
            crop=Crop.parse(raw.get("crop")),
            hotspot=Hotspot.parse(raw.get("hotspot")),
        )


@dataclass(frozen=True)
class Tool:
    """A tool or platform used on a project.

    Older documents store tools as plain strings, newer ones as objects with a
    name and an optional icon. Both are normalized into this type.
    """

    name: str
    icon: ImageRef | None = None

    @classmethod
    def named(cls, name: str) -> "Tool":
        return cls(name=name)

    @classmethod
    def with_icon(cls, name: str, icon: ImageRef | None) -> "Tool":
        return cls(name=name, icon=icon)


def parse_tool(raw) -> Tool:
    """Normalize a raw tool entry (string or object) into a Tool."""
    if isinstance(raw, str):
        return Tool.named(raw)
    if isinstance(raw, dict):
        return Tool.with_icon(raw.get("name") or UNKNOWN_TOOL_NAME, ImageRef.parse(raw.get("icon")))
    return Tool.named(UNKNOWN_TOOL_NAME)


def _slug(raw) -> str:
    if isinstance(raw, dict):
        return raw.get("current") or ""
    return raw or ""


def _parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def _require_id(doc: dict, kind: str) -> str:
    if not isinstance(doc, dict) or not doc.get("_id"):
        msg = f"{kind} document is missing an _id: {doc!r:.200}"
        raise ContentShapeError(msg)
    return doc["_id"]


@dataclass(frozen=True)
class Project:
    """A portfolio project."""

    id: str
    title: str
    slug: str
    client: str = ""
    description: str = ""
    main_image: ImageRef | None = None
    gallery: list[ImageRef] = field(default_factory=list)
    category: str = ""
    completed_date: date | None = None
    tools: list[Tool] = field(default_factory=list)
    website_url: str = ""
    featured: bool = False

    @classmethod
    def from_document(cls, doc: dict) -> "Project":
        project_id = _require_id(doc, "project")
        gallery = [ref for ref in (ImageRef.parse(img) for img in doc.get("gallery") or []) if ref]
        return cls(
            id=project_id,
            title=doc.get("title") or "",
            slug=_slug(doc.get("slug")),
            client=doc.get("client") or "",
            description=doc.get("description") or "",
            main_image=ImageRef.parse(doc.get("mainImage")),
            gallery=gallery,
            category=doc.get("category") or "",
            completed_date=_parse_date(doc.get("completedDate")),
            tools=[parse_tool(tool) for tool in doc.get("tools") or []],
            website_url=doc.get("websiteUrl") or "",
            featured=bool(doc.get("featured")),
        )

    @property
    def category_label(self) -> str:
        try:
            return ProjectCategory(self.category).label
        except ValueError:
            return self.category

    def is_ongoing(self, today: date | None = None) -> bool:
        """A project with no completion date, or one in the future, is ongoing."""
        today = today or date.today()
        return self.completed_date is None or self.completed_date > today

    def completion_label(self, today: date | None = None) -> str:
        if self.is_ongoing(today):
            return "Ongoing"
        return f"{self.completed_date:%B} {self.completed_date.day}, {self.completed_date.year}"

    @property
    def short_date(self) -> str:
        if self.completed_date is None:
            return ""
        return f"{self.completed_date:%b %Y}"


@dataclass(frozen=True)
class Pricing:
    starting_price: str = ""
    note: str = ""


@dataclass(frozen=True)
class Service:
    """A service offered by the agency."""

    id: str
    title: str
    slug: str
    short_description: str = ""
    full_description: list[dict] = field(default_factory=list)
    icon: ImageRef | None = None
    features: list[str] = field(default_factory=list)
    pricing: Pricing | None = None
    order: int = 0

    @classmethod
    def from_document(cls, doc: dict) -> "Service":
        service_id = _require_id(doc, "service")
        raw_pricing = doc.get("pricing")
        pricing = None
        if raw_pricing and (raw_pricing.get("startingPrice") or raw_pricing.get("pricingNote")):
            pricing = Pricing(
                starting_price=raw_pricing.get("startingPrice") or "",
                note=raw_pricing.get("pricingNote") or "",
            )
        return cls(
            id=service_id,
            title=doc.get("title") or "",
            slug=_slug(doc.get("slug")),
            short_description=doc.get("shortDescription") or "",
            full_description=list(doc.get("fullDescription") or []),
            icon=ImageRef.parse(doc.get("icon")),
            features=[feature for feature in doc.get("features") or [] if feature],
            pricing=pricing,
            order=doc.get("order") or 0,
        )

    @property
    def paragraphs(self) -> list[tuple[str, str]]:
        """Flatten rich-text blocks into (style, text) pairs, skipping empty blocks."""
        result = []
        for block in self.full_description:
            if block.get("_type") != "block":
                continue
            text = "".join(child.get("text", "") for child in block.get("children") or [])
            if text.strip():
                result.append((block.get("style") or "normal", text))
        return result


@dataclass(frozen=True)
class ContactSubmission:
    """A contact-form submission. Handed to the mail service, never stored."""

    name: str
    email: str
    phone: str
    service: str
    message: str

    def as_payload(self) -> dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "service": self.service,
            "message": self.message,
        }
