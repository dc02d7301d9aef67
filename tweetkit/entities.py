"""Entity metadata parsed out of tweet and user text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


class Indices(tuple):
    """Start (inclusive) and end (exclusive) offsets within text."""

    def __new__(cls, start: int = 0, end: int = 0) -> "Indices":
        return super().__new__(cls, (start, end))

    def start(self) -> int:
        return self[0]

    def end(self) -> int:
        return self[1]


def _indices(value: Any) -> Indices:
    return Indices(*value) if value else Indices()


@dataclass
class HashtagEntity:
    """A hashtag parsed from text."""

    indices: Indices = field(default_factory=Indices)
    text: str = ""


@dataclass
class URLEntity:
    """A URL parsed from text."""

    indices: Indices = field(default_factory=Indices)
    display_url: str = ""
    expanded_url: str = ""
    url: str = ""


@dataclass
class MediaSize:
    """Width, height and resize method of one media size."""

    width: int = 0
    height: int = 0
    resize: str = ""


@dataclass
class MediaSizes:
    """The sizes in which a media item is available."""

    thumb: MediaSize = field(default_factory=MediaSize)
    large: MediaSize = field(default_factory=MediaSize)
    medium: MediaSize = field(default_factory=MediaSize)
    small: MediaSize = field(default_factory=MediaSize)


@dataclass
class VideoVariant:
    """One available video encoding."""

    content_type: str = ""
    bitrate: int = 0
    url: str = ""


@dataclass
class VideoInfo:
    """Video details attached to video media."""

    aspect_ratio: tuple[int, int] = (0, 0)
    duration_millis: int = 0
    variants: list[VideoVariant] = field(default_factory=list)


@dataclass
class MediaEntity(URLEntity):
    """A media element attached to a tweet."""

    id: int = 0
    id_str: str = ""
    media_url: str = ""
    media_url_https: str = ""
    source_status_id: int = 0
    source_status_id_str: str = ""
    type: str = ""
    sizes: MediaSizes = field(default_factory=MediaSizes)
    video_info: VideoInfo = field(default_factory=VideoInfo)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "MediaEntity":
        data = data or {}
        sizes = data.get("sizes") or {}
        video = data.get("video_info") or {}
        aspect = video.get("aspect_ratio") or (0, 0)
        return cls(
            indices=_indices(data.get("indices")),
            display_url=data.get("display_url") or "",
            expanded_url=data.get("expanded_url") or "",
            url=data.get("url") or "",
            id=data.get("id") or 0,
            id_str=data.get("id_str") or "",
            media_url=data.get("media_url") or "",
            media_url_https=data.get("media_url_https") or "",
            source_status_id=data.get("source_status_id") or 0,
            source_status_id_str=data.get("source_status_id_str") or "",
            type=data.get("type") or "",
            sizes=MediaSizes(
                **{name: _media_size(sizes.get(name)) for name in ("thumb", "large", "medium", "small")}
            ),
            video_info=VideoInfo(
                aspect_ratio=(aspect[0], aspect[1]),
                duration_millis=video.get("duration_millis") or 0,
                variants=[
                    VideoVariant(
                        content_type=v.get("content_type") or "",
                        bitrate=v.get("bitrate") or 0,
                        url=v.get("url") or "",
                    )
                    for v in video.get("variants") or []
                ],
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "indices": list(self.indices),
            "display_url": self.display_url,
            "expanded_url": self.expanded_url,
            "url": self.url,
            "id": self.id,
            "id_str": self.id_str,
            "media_url": self.media_url,
            "media_url_https": self.media_url_https,
            "source_status_id": self.source_status_id,
            "source_status_id_str": self.source_status_id_str,
            "type": self.type,
            "sizes": {
                name: {"w": size.width, "h": size.height, "resize": size.resize}
                for name, size in (
                    ("thumb", self.sizes.thumb),
                    ("large", self.sizes.large),
                    ("medium", self.sizes.medium),
                    ("small", self.sizes.small),
                )
            },
            "video_info": {
                "aspect_ratio": list(self.video_info.aspect_ratio),
                "duration_millis": self.video_info.duration_millis,
                "variants": [
                    {"content_type": v.content_type, "bitrate": v.bitrate, "url": v.url}
                    for v in self.video_info.variants
                ],
            },
        }


def _media_size(data: Mapping[str, Any] | None) -> MediaSize:
    data = data or {}
    return MediaSize(
        width=data.get("w") or 0,
        height=data.get("h") or 0,
        resize=data.get("resize") or "",
    )


@dataclass
class MentionEntity:
    """A user mention parsed from text."""

    indices: Indices = field(default_factory=Indices)
    id: int = 0
    id_str: str = ""
    name: str = ""
    screen_name: str = ""


@dataclass
class Entities:
    """Hashtags, media, URLs and mentions parsed from a piece of text."""

    hashtags: list[HashtagEntity] = field(default_factory=list)
    media: list[MediaEntity] = field(default_factory=list)
    urls: list[URLEntity] = field(default_factory=list)
    user_mentions: list[MentionEntity] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Entities":
        data = data or {}
        return cls(
            hashtags=[
                HashtagEntity(indices=_indices(h.get("indices")), text=h.get("text") or "")
                for h in data.get("hashtags") or []
            ],
            media=[MediaEntity.from_dict(m) for m in data.get("media") or []],
            urls=[
                URLEntity(
                    indices=_indices(u.get("indices")),
                    display_url=u.get("display_url") or "",
                    expanded_url=u.get("expanded_url") or "",
                    url=u.get("url") or "",
                )
                for u in data.get("urls") or []
            ],
            user_mentions=[
                MentionEntity(
                    indices=_indices(m.get("indices")),
                    id=m.get("id") or 0,
                    id_str=m.get("id_str") or "",
                    name=m.get("name") or "",
                    screen_name=m.get("screen_name") or "",
                )
                for m in data.get("user_mentions") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "hashtags": [{"indices": list(h.indices), "text": h.text} for h in self.hashtags],
            "media": [m.to_dict() for m in self.media],
            "urls": [
                {
                    "indices": list(u.indices),
                    "display_url": u.display_url,
                    "expanded_url": u.expanded_url,
                    "url": u.url,
                }
                for u in self.urls
            ],
            "user_mentions": [
                {
                    "indices": list(m.indices),
                    "id": m.id,
                    "id_str": m.id_str,
                    "name": m.name,
                    "screen_name": m.screen_name,
                }
                for m in self.user_mentions
            ],
        }


@dataclass
class UserEntities:
    """Entities parsed from a user's url and description fields."""

    url: Entities = field(default_factory=Entities)
    description: Entities = field(default_factory=Entities)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserEntities":
        data = data or {}
        return cls(
            url=Entities.from_dict(data.get("url")),
            description=Entities.from_dict(data.get("description")),
        )


@dataclass
class ExtendedEntity:
    """Media information carried in a tweet's extended entities."""

    media: list[MediaEntity] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ExtendedEntity":
        data = data or {}
        return cls(media=[MediaEntity.from_dict(m) for m in data.get("media") or []])