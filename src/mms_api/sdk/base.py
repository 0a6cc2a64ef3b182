"""
Base model for MMS API payloads.

Every DTO on the wire derives from CamelCaseModel: attributes are snake_case
in Python and lower-camel-case in JSON. Incoming keys are matched without
regard to case, so `AccountId`, `accountid` and `accountId` all land on
`account_id`.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Base model that uses camelCase aliases and tolerates any key casing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def _keys_by_lower_name(cls) -> Dict[str, str]:
        keys = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or to_camel(name)
            keys[name.lower()] = alias
            keys[alias.lower()] = alias
        return keys

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        keys = cls._keys_by_lower_name()
        matched = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = keys.get(key.lower(), key)
            matched[key] = value
        return matched
