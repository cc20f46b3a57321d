"""
Group data models for the group matching engine.
"""

import json
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional, Union
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as SchemaError

from shared.errors import MalformedInputError, ValidationError


@dataclass(frozen=True)
class Group:
    """A named rule binding required attributes to a profile.

    Groups are immutable: requirements are copied into a read-only mapping
    on construction. ``metadata`` holds compact JSON bytes and is never
    interpreted while matching or ordering.
    """
    id: str = ""
    name: str = ""
    profile: str = ""
    requirements: Mapping[str, str] = field(default_factory=dict)
    metadata: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "requirements", MappingProxyType(dict(self.requirements)))
        object.__setattr__(self, "metadata", bytes(self.metadata))

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.profile,
            tuple(sorted(self.requirements.items())),
            self.metadata,
        ))

    def requirement_string(self) -> str:
        """Render requirements as sorted, comma-joined ``key=value`` pairs."""
        return ",".join(
            f"{key}={self.requirements[key]}" for key in sorted(self.requirements)
        )

    def assert_valid(self) -> None:
        """Raise ValidationError unless both id and profile are set."""
        missing = [name for name in ("id", "profile") if not getattr(self, name)]
        if missing:
            raise ValidationError(missing, details={"group_id": self.id, "name": self.name})

    def metadata_value(self) -> Any:
        """Decode metadata back into a structure, None when empty.

        Raises MalformedInputError when the stored bytes are not JSON.
        """
        if not self.metadata:
            return None
        try:
            return json.loads(self.metadata)
        except ValueError as e:
            raise MalformedInputError(
                "Group metadata is not valid JSON",
                details={"group_id": self.id, "error": str(e)}
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """Structured form accepted by parse_group."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "profile": self.profile,
            "requirements": dict(self.requirements),
        }
        if self.metadata:
            data["metadata"] = self.metadata_value()
        return data


class GroupDocument(BaseModel):
    """Wire shape of a group."""
    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field("", description="Group ID")
    name: StrictStr = Field("", description="Human readable label")
    profile: StrictStr = Field("", description="Profile reference")
    requirements: Optional[Dict[StrictStr, StrictStr]] = Field(None, description="Required attributes")
    metadata: Any = Field(None, description="Opaque metadata")

    def to_group(self) -> Group:
        return Group(
            id=self.id,
            name=self.name,
            profile=self.profile,
            requirements=dict(self.requirements or {}),
            metadata=encode_metadata(self.metadata),
        )


def encode_metadata(value: Any) -> bytes:
    """Store metadata as compact, key-sorted JSON bytes."""
    if value is None:
        return b""
    return json.dumps(value, separators=(",", ":"), sort_keys=True).encode("utf-8")


def parse_group(data: Union[bytes, str]) -> Group:
    """Parse a JSON group document.

    Raises MalformedInputError when the input is not JSON, is not an object,
    or a field has the wrong shape. Does not validate required fields; call
    ``Group.assert_valid`` before trusting the result.
    """
    try:
        document = GroupDocument.model_validate_json(data)
    except SchemaError as e:
        raise MalformedInputError(
            "Malformed group input",
            details={"errors": [
                {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                for err in e.errors()
            ]}
        ) from e
    return document.to_group()


def group_to_json(group: Group) -> str:
    """Serialize a group to the JSON form read by parse_group."""
    return json.dumps(group.to_dict(), sort_keys=True)
