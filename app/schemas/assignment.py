from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# older clients (and records they wrote) keep the creator under "userEmail"
OWNER_KEYS = ("creatorEmail", "userEmail")
CREATOR_ALIASES = AliasChoices(*OWNER_KEYS)


class AssignmentBase(BaseModel):
    """Open document: display fields are stored and returned as sent."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: Any = None
    description: Any = None
    difficulty: Any = None
    dueDate: Any = None
    marks: Any = None
    thumbnailUrl: Any = None
    creatorEmail: Any = Field(default=None, validation_alias=CREATOR_ALIASES)

    def owner_free_fields(self, **dump_opts) -> dict:
        """Dump without any owner key; the creator is only written on insert."""
        fields = self.model_dump(**dump_opts)
        for key in OWNER_KEYS:
            fields.pop(key, None)
        return fields


class AssignmentCreate(AssignmentBase):
    creatorEmail: str = Field(validation_alias=CREATOR_ALIASES)


class AssignmentUpdate(AssignmentBase):
    creatorEmail: Optional[str] = Field(default=None, validation_alias=CREATOR_ALIASES)


class Assignment(AssignmentBase):
    id: str


class AssignmentDelete(BaseModel):
    email: Optional[str] = None
