"""The outbound HTTP request built from a Sendivent builder."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SendRequest:
    """Represents the HTTP request for one send call."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON, encoded when the request is built

    @property
    def payload(self) -> dict[str, Any]:
        """Decoded copy of the JSON body."""
        return json.loads(self.body)
