"""Pydantic schemas for notification recipients."""

from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from sendivent.exceptions import ConfigurationError


class Contact(BaseModel):
    """
    A recipient carrying one or more channel identifiers.

    Every field is optional; the service routes on whichever identifiers are
    present. Unknown keyword arguments are kept as extra fields and sent
    along, so new channel identifiers work without a library upgrade.
    """

    id: Optional[str] = Field(None, description="Your application's user ID")
    name: Optional[str] = Field(None, description="Display name")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    email: Optional[str] = Field(None, description="Email address")
    phone: Optional[str] = Field(None, description="Phone number")
    slack_id: Optional[str] = Field(None, description="Slack user ID")
    meta: Optional[dict[str, Any]] = Field(None, description="Custom metadata")

    model_config = ConfigDict(extra="allow")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


RecipientItem = Union[str, Contact, Mapping[str, Any]]
Recipient = Union[RecipientItem, Sequence[RecipientItem]]


def serialize_recipient(recipient: Recipient) -> Any:
    """Convert a recipient value into its JSON-ready form (type checks only)."""
    if isinstance(recipient, (list, tuple)):
        return [_serialize_item(item) for item in recipient]
    return _serialize_item(recipient)


def _serialize_item(item: Any) -> Any:
    if isinstance(item, str):
        return item
    if isinstance(item, Contact):
        return item.to_wire()
    if isinstance(item, Mapping):
        return dict(item)
    raise ConfigurationError(f"Unsupported recipient type: {type(item).__name__}")
