"""
Shared base class for documents decoded from the node list API.

[BaseDocument][stunhook.models.base.BaseDocument] fixes the decoding rules
every model in this package follows:

* Keys bind only by alias, to the API's own spelling. The snake_case Python
  attribute names are not accepted as input keys, so
  ``StunNode.model_validate({"Name": "a"})`` decodes a name but
  ``{"name": "a"}`` is an ignored unknown key.
* Unknown keys are ignored so newer API versions keep decoding.
* A JSON ``null`` behaves like an absent key: the field keeps its default.
* Field types are strict. A number where a string is expected, or a float
  where an integer is expected, is a validation error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class BaseDocument(BaseModel):
    """Frozen, alias-bound, null-tolerant pydantic model."""

    model_config = ConfigDict(frozen=True, populate_by_name=False, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat ``null`` values (and a ``null`` object) as absent."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
