"""Shared schema helpers for request payloads."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError


class RequestSchema(Schema):
    """
    Base for request payload schemas.

    Every field loads as a string. Shape problems never decide the error
    kind on their own: a field that is missing or of the wrong JSON type
    loads as ``""`` and the service's ordered checks report it.
    """

    class Meta:
        unknown = EXCLUDE

    def load_lenient(self, data: Any) -> dict[str, Any]:
        """
        Load ``data``, blanking every field that fails to deserialize.

        A body that is not a JSON object yields all fields blank.
        """
        try:
            return self.load(data)
        except ValidationError as exc:
            valid = exc.valid_data if isinstance(exc.valid_data, dict) else {}
            return {name: valid.get(name, "") for name in self.load_fields}
