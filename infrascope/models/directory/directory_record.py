"""User directory models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from infrascope.constants.defaults import DEFAULT_ROLE, SEQUENCE_VALUE_DEFAULT


class DirectoryRecord(BaseModel):
    """One user entry as served by the ``/users`` endpoint.

    Wire names are camelCase (``_id``, ``slackUsername``...); Python code uses
    the snake_case attributes. Missing optional fields are defaulted rather
    than rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    cn: str = ""
    email: str = ""
    manager: str = ""
    org: str = ""
    slack_username: str = Field(default="", alias="slackUsername")
    business_unit: str = Field(default="", alias="businessUnit")
    is_manager: bool = Field(default=False, alias="isManager")
    is_active: bool = Field(default=True, alias="isActive")
    roles: list[str] = Field(default_factory=lambda: [DEFAULT_ROLE])
    sequence_value: int = Field(default=SEQUENCE_VALUE_DEFAULT, alias="sequenceValue")
    last_logged_in: datetime | None = Field(default=None, alias="lastLoggedIn")

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: object) -> object:
        # Some directories serve numeric ids.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("cn", "email", "manager", "org", "slack_username", "business_unit", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("roles", mode="before")
    @classmethod
    def _default_roles(cls, value: object) -> object:
        if not value:
            return [DEFAULT_ROLE]
        if isinstance(value, str):
            return [value]
        return list(dict.fromkeys(value))

    @field_validator("sequence_value", mode="before")
    @classmethod
    def _default_sequence(cls, value: object) -> object:
        return SEQUENCE_VALUE_DEFAULT if value is None else value

    def has_role(self, role: str) -> bool:
        return role in self.roles


class DirectoryFilters(BaseModel):
    """UI-facing query parameters for the users table."""

    model_config = ConfigDict(populate_by_name=True)

    search: str = ""
    role: str | None = None
    org: str | None = None
    business_unit: str | None = Field(default=None, alias="businessUnit")
    is_active: bool | None = Field(default=None, alias="isActive")

    @property
    def normalized_search(self) -> str:
        """Trimmed, case-folded search text; empty means no text filter."""
        return self.search.strip().lower()


class DirectoryStats(BaseModel):
    """Aggregate counts shown above the users table."""

    total_users: int = 0
    active_users: int = 0
    inactive_users: int = 0
    by_role: dict[str, int] = Field(default_factory=dict)
    by_org: dict[str, int] = Field(default_factory=dict)
    by_business_unit: dict[str, int] = Field(default_factory=dict)
