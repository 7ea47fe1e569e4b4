"""Normalized response returned by a successful send call."""

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

# Current key first, then the legacy key older servers emit.
DELIVERIES_FIELDS = ("deliveries", "data")

Delivery = dict[str, Union[str, bool]]


@dataclass(frozen=True)
class SendResponse:
    """
    Result of a send call that reached the API.

    ``None`` means the field was absent from the response body. ``error`` is
    authoritative for failure regardless of ``success``.
    """
    success: bool
    data: Optional[list[Delivery]] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, Any],
        deliveries_field: Optional[str] = None,
    ) -> "SendResponse":
        """
        Build a response from a decoded JSON body.

        Values are copied as-is. Pass ``deliveries_field`` to read one
        specific key instead of falling back across known names.
        """
        fields = (deliveries_field,) if deliveries_field else DELIVERIES_FIELDS
        deliveries = None
        for key in fields:
            if data.get(key) is not None:
                deliveries = data[key]
                break

        return cls(
            success=data.get("success") is True,
            data=deliveries,
            error=data.get("error"),
            message=data.get("message"),
        )

    def is_success(self) -> bool:
        return self.success

    def has_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            obj["data"] = self.data
        if self.error is not None:
            obj["error"] = self.error
        if self.message is not None:
            obj["message"] = self.message
        return obj

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
