"""The API's current configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tweetkit.api import Requester


@dataclass
class SinglePhotoSize:
    """Height, width and resize method of one photo size."""

    height: int = 0
    width: int = 0
    resize: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SinglePhotoSize | None":
        if data is None:
            return None
        return cls(
            height=data.get("h") or 0,
            width=data.get("w") or 0,
            resize=data.get("resize") or "",
        )


@dataclass
class PhotoSizes:
    """The four supported photo sizes."""

    large: SinglePhotoSize | None = None
    medium: SinglePhotoSize | None = None
    small: SinglePhotoSize | None = None
    thumb: SinglePhotoSize | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PhotoSizes | None":
        if data is None:
            return None
        return cls(
            large=SinglePhotoSize.from_dict(data.get("large")),
            medium=SinglePhotoSize.from_dict(data.get("medium")),
            small=SinglePhotoSize.from_dict(data.get("small")),
            thumb=SinglePhotoSize.from_dict(data.get("thumb")),
        )


@dataclass
class Config:
    """Limits and settings currently used by the API."""

    characters_reserved_per_media: int = 0
    dm_text_character_limit: int = 0
    max_media_per_upload: int = 0
    photo_size_limit: int = 0
    photo_sizes: PhotoSizes | None = None
    short_url_length: int = 0
    short_url_length_https: int = 0
    non_username_paths: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Config":
        data = data or {}
        return cls(
            characters_reserved_per_media=data.get("characters_reserved_per_media") or 0,
            dm_text_character_limit=data.get("dm_text_character_limit") or 0,
            max_media_per_upload=data.get("max_media_per_upload") or 0,
            photo_size_limit=data.get("photo_size_limit") or 0,
            photo_sizes=PhotoSizes.from_dict(data.get("photo_sizes")),
            short_url_length=data.get("short_url_length") or 0,
            short_url_length_https=data.get("short_url_length_https") or 0,
            non_username_paths=list(data.get("non_username_paths") or []),
        )


class ConfigService:
    """Access to the ``help/configuration`` endpoint."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.path("help/")

    def get(self) -> Config:
        """Fetch the current configuration."""
        payload, _ = self._requester.receive("GET", "configuration.json")
        return Config.from_dict(payload)