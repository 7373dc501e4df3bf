from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from volumes.errors import InvalidBindModeError, PlanDecodeError


class BindMode(str, Enum):
    READ_ONLY = "ro"
    READ_WRITE = "rw"

    @classmethod
    def parse(cls, mode: BindMode | str | None) -> BindMode:
        """Turn a caller-supplied mode into a BindMode.

        An empty mode means read-write. Anything other than "ro" or "rw"
        raises InvalidBindModeError.
        """
        if not mode:
            return cls.READ_WRITE
        try:
            return cls(mode)
        except ValueError:
            raise InvalidBindModeError(
                f'invalid bind mode, expected "{cls.READ_ONLY.value}" or '
                f'"{cls.READ_WRITE.value}", got "{mode}"'
            ) from None


class VolumePlan(BaseModel):
    name: str
    opts: dict[str, Any] = Field(default_factory=dict)


class Volume(BaseModel):
    """A named storage unit owned by a team and provisioned in a pool.

    ``plan.opts`` is filled in by validation from the plan configuration;
    whatever the caller puts there is replaced.
    """

    name: str
    pool: str
    plan: VolumePlan
    team_owner: str
    status: str = ""
    opts: dict[str, str] | None = None

    @field_validator("opts", mode="before")
    @classmethod
    def empty_opts_to_none(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        """Empty driver options are stored as absent."""
        if not v:
            return None
        return v

    def with_plan(self, plan: VolumePlan) -> Volume:
        """Return a copy of this volume carrying ``plan``."""
        return self.model_copy(update={"plan": plan.model_copy(deep=True)}, deep=True)

    def unmarshal_plan(self, target: Any) -> Any:
        """Decode the resolved plan options into ``target``.

        ``target`` is a pydantic model or any type pydantic can validate
        against. The options go through a JSON round trip first, so only
        JSON-representable values survive.
        """
        target_name = getattr(target, "__name__", repr(target))
        try:
            raw = json.dumps(self.plan.opts)
            return TypeAdapter(target).validate_json(raw)
        except (TypeError, ValueError) as exc:
            raise PlanDecodeError(
                f"cannot decode opts of plan {self.plan.name!r} into {target_name}: {exc}"
            ) from exc


class VolumeBindID(BaseModel):
    model_config = ConfigDict(frozen=True)

    app: str
    mount_point: str
    volume: str


class VolumeBind(BaseModel):
    id: VolumeBindID
    mode: BindMode = BindMode.READ_WRITE
