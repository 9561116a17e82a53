"""Pytest configuration and shared fixtures for Flex Agency tests."""

import pytest


class FakeTimer:
    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock with asyncio's ``call_later`` signature."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [t for t in self.timers if not t.cancelled and t.when <= target + 1e-9]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self.timers.remove(timer)
            self.now = timer.when
            timer.callback()
        self.now = target

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


IMAGE_REF = "image-Tb9Ew8CXIwaY6R1kjMvI0uRR-2000x3000-jpg"
ICON_REF = "image-a1b2c3d4e5-64x64-png"


@pytest.fixture
def project_doc() -> dict:
    """A project document as returned by the content store."""
    return {
        "_id": "project-1",
        "title": "Tea Estate Rebrand",
        "slug": {"_type": "slug", "current": "tea-estate-rebrand"},
        "client": "Ceylon Leaf Co.",
        "description": "A full rebrand for a heritage tea estate.",
        "mainImage": {"_type": "image", "asset": {"_ref": IMAGE_REF, "_type": "reference"}},
        "gallery": [
            {"_type": "image", "asset": {"_ref": IMAGE_REF}},
            {"_type": "image", "asset": {"_ref": "image-f00ba4-800x600-png"}},
        ],
        "category": "branding-and-design",
        "completedDate": "2024-03-15",
        "tools": ["Figma", {"name": "Illustrator", "icon": {"asset": {"_ref": ICON_REF}}}],
        "websiteUrl": "https://ceylonleaf.example.com",
        "featured": True,
    }


@pytest.fixture
def service_doc() -> dict:
    """A service document as returned by the content store."""
    return {
        "_id": "service-1",
        "title": "SEO Optimization",
        "slug": {"current": "seo-optimization"},
        "shortDescription": "Rank higher and get found.",
        "fullDescription": [
            {"_type": "block", "style": "h2", "children": [{"_type": "span", "text": "Why SEO"}]},
            {
                "_type": "block",
                "style": "normal",
                "children": [{"_type": "span", "text": "Search is "}, {"_type": "span", "text": "where buyers start."}],
            },
            {"_type": "block", "style": "normal", "children": [{"_type": "span", "text": "   "}]},
            {"_type": "image", "asset": {"_ref": IMAGE_REF}},
        ],
        "icon": {"asset": {"_ref": ICON_REF}},
        "features": ["Keyword research", "Technical audit", ""],
        "pricing": {"startingPrice": "Starting from $500", "pricingNote": "Monthly retainer"},
        "order": 2,
    }
