"""Direct Message events, plus the older direct message endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Mapping

import requests

from tweetkit.api import Params, Requester
from tweetkit.entities import Entities, MediaEntity

_RUBY_DATE = "%a %b %d %H:%M:%S %z %Y"


@dataclass
class DirectMessageTarget:
    """The recipient of a Direct Message event."""

    recipient_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageTarget | None":
        if data is None:
            return None
        return cls(recipient_id=data.get("recipient_id") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"recipient_id": self.recipient_id}


@dataclass
class DirectMessageDataAttachment:
    """A media attachment of a Direct Message event."""

    type: str = ""
    media: MediaEntity = field(default_factory=MediaEntity)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageDataAttachment | None":
        if data is None:
            return None
        return cls(type=data.get("type") or "", media=MediaEntity.from_dict(data.get("media")))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "media": self.media.to_dict()}


@dataclass
class DirectMessageQuickReplyOption:
    """One option of a quick reply."""

    label: str = ""
    description: str = ""
    metadata: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"label": self.label}
        if self.description:
            result["description"] = self.description
        if self.metadata:
            result["metadata"] = self.metadata
        return result


@dataclass
class DirectMessageQuickReply:
    """Quick reply options offered with a Direct Message event."""

    type: str = ""
    options: list[DirectMessageQuickReplyOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageQuickReply | None":
        if data is None:
            return None
        return cls(
            type=data.get("type") or "",
            options=[
                DirectMessageQuickReplyOption(
                    label=o.get("label") or "",
                    description=o.get("description") or "",
                    metadata=o.get("metadata") or "",
                )
                for o in data.get("options") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "options": [o.to_dict() for o in self.options]}


@dataclass
class DirectMessageCTA:
    """A call-to-action button of a Direct Message event."""

    type: str = ""
    label: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "label": self.label, "url": self.url}


@dataclass
class DirectMessageData:
    """The message data of a Direct Message event."""

    text: str = ""
    entities: Entities | None = None
    attachment: DirectMessageDataAttachment | None = None
    quick_reply: DirectMessageQuickReply | None = None
    ctas: list[DirectMessageCTA] = field(default_factory=list)

    # The entities travel under the key "entitites", spelled as this client
    # has always sent and read it.
    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageData | None":
        if data is None:
            return None
        entities = data.get("entitites")
        return cls(
            text=data.get("text") or "",
            entities=Entities.from_dict(entities) if entities is not None else None,
            attachment=DirectMessageDataAttachment.from_dict(data.get("attachment")),
            quick_reply=DirectMessageQuickReply.from_dict(data.get("quick_reply")),
            ctas=[
                DirectMessageCTA(
                    type=c.get("type") or "",
                    label=c.get("label") or "",
                    url=c.get("url") or "",
                )
                for c in data.get("ctas") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"text": self.text}
        if self.entities is not None:
            result["entitites"] = self.entities.to_dict()
        if self.attachment is not None:
            result["attachment"] = self.attachment.to_dict()
        if self.quick_reply is not None:
            result["quick_reply"] = self.quick_reply.to_dict()
        if self.ctas:
            result["ctas"] = [c.to_dict() for c in self.ctas]
        return result


@dataclass
class DirectMessageEventMessage:
    """Message contents with its sender and target recipient."""

    sender_id: str = ""
    target: DirectMessageTarget | None = None
    data: DirectMessageData | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageEventMessage | None":
        if data is None:
            return None
        return cls(
            sender_id=data.get("sender_id") or "",
            target=DirectMessageTarget.from_dict(data.get("target")),
            data=DirectMessageData.from_dict(data.get("message_data")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.sender_id:
            result["sender_id"] = self.sender_id
        result["target"] = self.target.to_dict() if self.target is not None else None
        result["message_data"] = self.data.to_dict() if self.data is not None else None
        return result


@dataclass
class DirectMessageEvent:
    """A single Direct Message sent or received."""

    created_at: str = ""
    id: str = ""
    type: str = ""
    message: DirectMessageEventMessage | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageEvent":
        data = data or {}
        return cls(
            created_at=data.get("created_timestamp") or "",
            id=data.get("id") or "",
            type=data.get("type") or "",
            message=DirectMessageEventMessage.from_dict(data.get("message_create")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.created_at:
            result["created_timestamp"] = self.created_at
        if self.id:
            result["id"] = self.id
        result["type"] = self.type
        result["message_create"] = self.message.to_dict() if self.message is not None else None
        return result


@dataclass
class DirectMessageEvents:
    """A page of Direct Message events."""

    events: list[DirectMessageEvent] = field(default_factory=list)
    next_cursor: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageEvents":
        data = data or {}
        return cls(
            events=[DirectMessageEvent.from_dict(e) for e in data.get("events") or []],
            next_cursor=data.get("next_cursor") or "",
        )


@dataclass
class DirectMessage:
    """A direct message to a single recipient (deprecated endpoints).

    ``recipient`` and ``sender`` hold the user objects as decoded JSON.
    """

    created_at: str = ""
    entities: Entities | None = None
    id: int = 0
    id_str: str = ""
    recipient: dict[str, Any] | None = None
    recipient_id: int = 0
    recipient_screen_name: str = ""
    sender: dict[str, Any] | None = None
    sender_id: int = 0
    sender_screen_name: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessage":
        data = data or {}
        entities = data.get("entities")
        recipient = data.get("recipient")
        sender = data.get("sender")
        return cls(
            created_at=data.get("created_at") or "",
            entities=Entities.from_dict(entities) if entities is not None else None,
            id=data.get("id") or 0,
            id_str=data.get("id_str") or "",
            recipient=dict(recipient) if recipient is not None else None,
            recipient_id=data.get("recipient_id") or 0,
            recipient_screen_name=data.get("recipient_screen_name") or "",
            sender=dict(sender) if sender is not None else None,
            sender_id=data.get("sender_id") or 0,
            sender_screen_name=data.get("sender_screen_name") or "",
            text=data.get("text") or "",
        )

    def created_at_time(self) -> datetime:
        """Parse ``created_at``; raises ValueError if it is malformed."""
        return datetime.strptime(self.created_at, _RUBY_DATE)


@dataclass
class DirectMessageEventsNewParams:
    """The JSON body for :meth:`DirectMessageService.events_new`."""

    event: DirectMessageEvent | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"event": self.event.to_dict() if self.event is not None else None}


@dataclass
class DirectMessageEventsShowParams(Params):
    """Parameters for :meth:`DirectMessageService.events_show`."""

    id: str = ""


@dataclass
class DirectMessageEventsListParams(Params):
    """Parameters for :meth:`DirectMessageService.events_list`."""

    cursor: str = ""
    count: int = 0


@dataclass
class DirectMessageGetParams(Params):
    """Parameters for :meth:`DirectMessageService.get`."""

    since_id: int = 0
    max_id: int = 0
    count: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class DirectMessageSentParams(Params):
    """Parameters for :meth:`DirectMessageService.sent`."""

    since_id: int = 0
    max_id: int = 0
    count: int = 0
    page: int = 0
    include_entities: bool | None = None


@dataclass
class DirectMessageNewParams(Params):
    """Parameters for :meth:`DirectMessageService.new`."""

    user_id: int = 0
    screen_name: str = ""
    text: str = field(default="", metadata={"keep_empty": True})


@dataclass
class DirectMessageDestroyParams(Params):
    """Parameters for :meth:`DirectMessageService.destroy`."""

    id: int = 0
    include_entities: bool | None = None


class DirectMessageService:
    """Access to the ``direct_messages`` endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._base = requester
        self._requester = requester.path("direct_messages/")

    def events_new(self, params: DirectMessageEventsNewParams) -> DirectMessageEvent | None:
        """Publish a new Direct Message event and return it."""
        payload, _ = self._requester.receive("POST", "events/new.json", json_body=params)
        return _wrapped_event(payload)

    def events_show(
        self, event_id: str, params: DirectMessageEventsShowParams | None = None
    ) -> DirectMessageEvent | None:
        """Return a single Direct Message event by id."""
        query = replace(params or DirectMessageEventsShowParams(), id=event_id)
        payload, _ = self._requester.receive("GET", "events/show.json", query=query)
        return _wrapped_event(payload)

    def events_list(
        self, params: DirectMessageEventsListParams | None = None
    ) -> DirectMessageEvents:
        """Return sent and received events of the last 30 days, newest first."""
        payload, _ = self._requester.receive("GET", "events/list.json", query=params)
        return DirectMessageEvents.from_dict(payload)

    def events_destroy(self, event_id: str) -> requests.Response:
        """Delete the Direct Message event with the given id."""
        _, response = self._requester.receive(
            "DELETE", "events/destroy.json", query={"id": event_id}
        )
        return response

    def show(self, dm_id: int) -> DirectMessage:
        """Return the requested direct message (deprecated endpoint)."""
        payload, _ = self._requester.receive("GET", "show.json", query={"id": dm_id})
        return DirectMessage.from_dict(payload)

    def get(self, params: DirectMessageGetParams | None = None) -> list[DirectMessage]:
        """Return recent direct messages received (deprecated endpoint)."""
        payload, _ = self._base.receive("GET", "direct_messages.json", query=params)
        return [DirectMessage.from_dict(item) for item in payload or []]

    def sent(self, params: DirectMessageSentParams | None = None) -> list[DirectMessage]:
        """Return recent direct messages sent (deprecated endpoint)."""
        payload, _ = self._requester.receive("GET", "sent.json", query=params)
        return [DirectMessage.from_dict(item) for item in payload or []]

    def new(self, params: DirectMessageNewParams) -> DirectMessage:
        """Send a new direct message (deprecated endpoint)."""
        payload, _ = self._requester.receive("POST", "new.json", form=params)
        return DirectMessage.from_dict(payload)

    def destroy(
        self, dm_id: int, params: DirectMessageDestroyParams | None = None
    ) -> DirectMessage:
        """Delete a direct message and return it (deprecated endpoint)."""
        form = replace(params or DirectMessageDestroyParams(), id=dm_id)
        payload, _ = self._requester.receive("POST", "destroy.json", form=form)
        return DirectMessage.from_dict(payload)


def _wrapped_event(payload: Any) -> DirectMessageEvent | None:
    event = (payload or {}).get("event")
    return DirectMessageEvent.from_dict(event) if event is not None else None