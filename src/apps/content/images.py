"""Turn content store image references into CDN URLs."""

import math
import re
from dataclasses import dataclass, replace
from urllib.parse import urlencode

from django.conf import settings

from .records import Crop, Hotspot, ImageRef

IMAGE_CDN_URL = "https://cdn.sanity.io"

FIT_MODES = frozenset({"clip", "crop", "fill", "fillmax", "max", "scale", "min"})

_ASSET_REF = re.compile(r"^image-(?P<id>[A-Za-z0-9]+)-(?P<dims>\d+x\d+)-(?P<format>[a-z0-9]+)$")


def _image_ref(source) -> ImageRef:
    if isinstance(source, ImageRef):
        return source
    ref = ImageRef.parse(source) if isinstance(source, (str, dict)) else None
    if ref is None:
        msg = f"Unable to resolve image reference from {source!r}"
        raise ValueError(msg)
    return ref


def _round(value: float) -> int:
    """Round halves up, matching the CDN client's pixel arithmetic."""
    return math.floor(value + 0.5)


def source_rect(
    image_width: int,
    image_height: int,
    crop: Crop,
    hotspot: Hotspot,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int, int, int]:
    """Return the ``(left, top, width, height)`` source pixels to render.

    Without a target aspect ratio this is the editor crop. With both *width*
    and *height* the crop is trimmed to that ratio, centred on the hotspot
    and kept inside the crop.
    """
    crop_left = _round(crop.left * image_width)
    crop_top = _round(crop.top * image_height)
    crop_width = _round(image_width - crop.right * image_width - crop_left)
    crop_height = _round(image_height - crop.bottom * image_height - crop_top)

    if not (width and height) or crop_width <= 0 or crop_height <= 0:
        return crop_left, crop_top, crop_width, crop_height

    ratio = width / height
    if crop_width / crop_height > ratio:
        rect_height = crop_height
        rect_width = _round(rect_height * ratio)
        left = max(0, _round(hotspot.x * image_width - rect_width / 2))
        if left < crop_left:
            left = crop_left
        elif left + rect_width > crop_left + crop_width:
            left = crop_left + crop_width - rect_width
        return left, max(0, crop_top), rect_width, rect_height

    rect_width = crop_width
    rect_height = _round(rect_width / ratio)
    top = max(0, _round(hotspot.y * image_height - rect_height / 2))
    if top < crop_top:
        top = crop_top
    elif top + rect_height > crop_top + crop_height:
        top = crop_top + crop_height - rect_height
    return max(0, crop_left), top, rect_width, rect_height


@dataclass(frozen=True)
class ImageUrl:
    """An image URL with chainable transforms. Each transform returns a new instance."""

    base_url: str
    project_id: str
    dataset: str
    asset_id: str
    dimensions: str
    file_format: str
    w: int | None = None
    h: int | None = None
    q: int | None = None
    fm: str | None = None
    auto: str | None = None
    fit: str | None = None
    crop: Crop | None = None
    hotspot: Hotspot | None = None

    def width(self, value: int) -> "ImageUrl":
        return replace(self, w=int(value))

    def height(self, value: int) -> "ImageUrl":
        return replace(self, h=int(value))

    def quality(self, value: int) -> "ImageUrl":
        return replace(self, q=int(value))

    def format(self, value: str) -> "ImageUrl":
        return replace(self, fm=value)

    def auto_format(self) -> "ImageUrl":
        return replace(self, auto="format")

    def fit_mode(self, mode: str) -> "ImageUrl":
        if mode not in FIT_MODES:
            msg = f"Unsupported fit mode {mode!r}"
            raise ValueError(msg)
        return replace(self, fit=mode)

    def rect(self) -> tuple[int, int, int, int] | None:
        """Source rectangle for the editor framing, or None when the whole image is used."""
        if self.crop is None and self.hotspot is None:
            return None
        image_width, image_height = (int(part) for part in self.dimensions.split("x"))
        rect = source_rect(
            image_width,
            image_height,
            self.crop or Crop(),
            self.hotspot or Hotspot(),
            width=self.w,
            height=self.h,
        )
        if rect == (0, 0, image_width, image_height):
            return None
        return rect

    def url(self) -> str:
        path = (
            f"{self.base_url}/images/{self.project_id}/{self.dataset}/"
            f"{self.asset_id}-{self.dimensions}.{self.file_format}"
        )
        params = []
        rect = self.rect()
        if rect is not None:
            params.append(("rect", ",".join(str(value) for value in rect)))
        params += [
            (name, value)
            for name, value in (
                ("w", self.w),
                ("h", self.h),
                ("q", self.q),
                ("fm", self.fm),
                ("auto", self.auto),
                ("fit", self.fit),
            )
            if value is not None
        ]
        if not params:
            return path
        return f"{path}?{urlencode(params, safe=',')}"

    def __str__(self) -> str:
        return self.url()


class ImageUrlBuilder:
    """Builds ImageUrl instances for a given project and dataset."""

    def __init__(self, *, project_id: str, dataset: str, base_url: str = IMAGE_CDN_URL) -> None:
        self.project_id = project_id
        self.dataset = dataset
        self.base_url = base_url.rstrip("/")

    def image(self, source) -> ImageUrl:
        """Start a URL for *source*.

        Raises:
            ValueError: If *source* is not a well-formed image asset reference.
        """
        ref = _image_ref(source)
        match = _ASSET_REF.match(ref.ref)
        if match is None:
            msg = f"Malformed image asset reference {ref.ref!r}"
            raise ValueError(msg)
        return ImageUrl(
            base_url=self.base_url,
            project_id=self.project_id,
            dataset=self.dataset,
            asset_id=match["id"],
            dimensions=match["dims"],
            file_format=match["format"],
            crop=ref.crop,
            hotspot=ref.hotspot,
        )


def get_builder() -> ImageUrlBuilder:
    return ImageUrlBuilder(
        project_id=getattr(settings, "SANITY_PROJECT_ID", ""),
        dataset=getattr(settings, "SANITY_DATASET", "production"),
    )


def url_for(source) -> ImageUrl:
    """Start a URL for *source* using the configured project and dataset."""
    return get_builder().image(source)
