"""Tests for the gallery lightbox."""

import pytest

from apps.content.gallery import BodyScrollLock, GalleryImage, GalleryViewer, gallery_images
from apps.content.images import ImageUrlBuilder
from apps.content.records import ImageRef

from .conftest import IMAGE_REF


def _images(count: int) -> list[GalleryImage]:
    return [GalleryImage(url=f"thumb-{i}", full_url=f"full-{i}") for i in range(count)]


class TestGalleryViewer:
    """Tests for GalleryViewer."""

    def test_starts_closed(self) -> None:
        viewer = GalleryViewer(_images(3))
        assert not viewer.is_open
        assert viewer.current is None
        assert viewer.counter == ""

    def test_open_locks_scroll(self) -> None:
        lock = BodyScrollLock()
        viewer = GalleryViewer(_images(3), scroll_lock=lock)
        viewer.open(1)
        assert viewer.index == 1
        assert lock.locked
        assert viewer.current.full_url == "full-1"

    def test_close_releases_scroll(self) -> None:
        lock = BodyScrollLock()
        viewer = GalleryViewer(_images(3), scroll_lock=lock)
        viewer.open(0)
        viewer.close()
        assert viewer.index is None
        assert not lock.locked

    def test_open_out_of_range(self) -> None:
        viewer = GalleryViewer(_images(2))
        with pytest.raises(IndexError):
            viewer.open(2)
        with pytest.raises(IndexError):
            viewer.open(-1)

    @pytest.mark.parametrize(("start", "presses"), [(0, 1), (2, 1), (1, 7), (4, 10), (3, 0)])
    def test_next_wraps(self, start: int, presses: int) -> None:
        viewer = GalleryViewer(_images(5))
        viewer.open(start)
        for _ in range(presses):
            viewer.next()
        assert viewer.index == (start + presses) % 5

    @pytest.mark.parametrize(("start", "presses"), [(0, 1), (2, 3), (1, 7), (4, 10)])
    def test_previous_wraps(self, start: int, presses: int) -> None:
        viewer = GalleryViewer(_images(5))
        viewer.open(start)
        for _ in range(presses):
            viewer.previous()
        assert viewer.index == (start - presses) % 5

    def test_peek_indexes(self) -> None:
        viewer = GalleryViewer(_images(4))
        viewer.open(0)
        assert viewer.next_index == 1
        assert viewer.previous_index == 3
        assert viewer.index == 0

    def test_navigation_when_closed_is_noop(self) -> None:
        viewer = GalleryViewer(_images(3))
        viewer.next()
        viewer.previous()
        assert viewer.index is None

    def test_counter_is_one_based(self) -> None:
        viewer = GalleryViewer(_images(5))
        viewer.open(2)
        assert viewer.counter == "3 / 5"

    def test_single_image_has_no_navigation(self) -> None:
        viewer = GalleryViewer(_images(1))
        viewer.open(0)
        assert not viewer.has_navigation
        viewer.next()
        viewer.previous()
        assert viewer.index == 0

    def test_overlay_click_closes(self) -> None:
        viewer = GalleryViewer(_images(2))
        viewer.open(1)
        viewer.click_overlay()
        assert not viewer.is_open

    def test_image_click_keeps_open(self) -> None:
        viewer = GalleryViewer(_images(2))
        viewer.open(1)
        viewer.click_image()
        assert viewer.index == 1


class TestGalleryImages:
    """Tests for building gallery URLs."""

    def test_thumbnail_and_full_urls(self) -> None:
        builder = ImageUrlBuilder(project_id="abc123", dataset="production")
        (image,) = gallery_images([{"asset": {"_ref": IMAGE_REF}}], builder)
        assert image.url.endswith("?w=800&h=600&fit=crop")
        assert image.full_url.endswith("?w=1920")

    def test_malformed_references_skipped(self) -> None:
        builder = ImageUrlBuilder(project_id="abc123", dataset="production")
        assert len(gallery_images([IMAGE_REF, "bogus"], builder)) == 1

    def test_cropped_image_thumbnail_uses_editor_crop(self) -> None:
        builder = ImageUrlBuilder(project_id="abc123", dataset="production")
        source = ImageRef.parse({"asset": {"_ref": IMAGE_REF}, "crop": {"top": 0.1, "bottom": 0.1}})
        (image,) = gallery_images([source], builder)
        assert image.url.endswith("?rect=0,750,2000,1500&w=800&h=600&fit=crop")
        assert image.full_url.endswith("?rect=0,300,2000,2400&w=1920")
