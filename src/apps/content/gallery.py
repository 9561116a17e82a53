"""Lightbox state for a project's image gallery."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .images import ImageUrlBuilder, get_builder

THUMBNAIL_WIDTH = 800
THUMBNAIL_HEIGHT = 600
FULL_WIDTH = 1920

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GalleryImage:
    url: str
    full_url: str


def gallery_images(sources: Iterable, builder: ImageUrlBuilder | None = None) -> list[GalleryImage]:
    """Build thumbnail and full-resolution URLs, skipping malformed references."""
    builder = builder or get_builder()
    images = []
    for source in sources:
        try:
            image = builder.image(source)
        except ValueError:
            logger.warning("Skipping unusable gallery image: %r", source)
            continue
        images.append(
            GalleryImage(
                url=image.width(THUMBNAIL_WIDTH).height(THUMBNAIL_HEIGHT).fit_mode("crop").url(),
                full_url=image.width(FULL_WIDTH).url(),
            )
        )
    return images


class ScrollLock(Protocol):
    def lock(self) -> None: ...

    def release(self) -> None: ...


class BodyScrollLock:
    """Scroll lock for a server-rendered page; the base template reads ``locked``."""

    def __init__(self) -> None:
        self.locked = False

    def lock(self) -> None:
        self.locked = True

    def release(self) -> None:
        self.locked = False


class GalleryViewer:
    """Modal viewer over an ordered image list with circular navigation."""

    def __init__(self, images: Iterable[GalleryImage], *, scroll_lock: ScrollLock | None = None) -> None:
        self.images = list(images)
        self.scroll_lock = scroll_lock or BodyScrollLock()
        self.index: int | None = None

    def __len__(self) -> int:
        return len(self.images)

    @property
    def is_open(self) -> bool:
        return self.index is not None

    @property
    def has_navigation(self) -> bool:
        """Next/previous controls are only offered for more than one image."""
        return len(self.images) > 1

    @property
    def current(self) -> GalleryImage | None:
        if self.index is None:
            return None
        return self.images[self.index]

    @property
    def counter(self) -> str:
        if self.index is None:
            return ""
        return f"{self.index + 1} / {len(self.images)}"

    @property
    def next_index(self) -> int | None:
        if self.index is None:
            return None
        return (self.index + 1) % len(self.images)

    @property
    def previous_index(self) -> int | None:
        if self.index is None:
            return None
        return (self.index - 1 + len(self.images)) % len(self.images)

    def open(self, index: int) -> None:
        """Open the viewer on *index* and lock background scrolling.

        Raises:
            IndexError: If *index* is outside the gallery.
        """
        if not 0 <= index < len(self.images):
            msg = f"Gallery has no image at index {index}"
            raise IndexError(msg)
        self.index = index
        self.scroll_lock.lock()

    def close(self) -> None:
        self.index = None
        self.scroll_lock.release()

    def next(self) -> None:
        if self.has_navigation and self.index is not None:
            self.index = self.next_index

    def previous(self) -> None:
        if self.has_navigation and self.index is not None:
            self.index = self.previous_index

    def click_overlay(self) -> None:
        """A click on the backdrop outside the image closes the viewer."""
        self.close()

    def click_image(self) -> None:
        """Clicks on the image itself stop at the image and leave the viewer open."""
