"""Resolution of a volume's pool, team and plan into concrete plan options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from volumes.domain.config_store import convert_entries
from volumes.domain.volume import Volume, VolumePlan
from volumes.errors import (
    EmptyNameError,
    PlanConfigError,
    PoolResolutionError,
    ProvisionerResolutionError,
    TeamResolutionError,
)


@dataclass(frozen=True, slots=True)
class ResolvedPool:
    name: str
    provisioner: str | None


class PoolResolver(Protocol):
    def get_pool(self, name: str) -> ResolvedPool:
        """Return the pool called ``name``; raise LookupError if unknown."""
        ...


class TeamResolver(Protocol):
    def team_exists(self, name: str) -> bool: ...


class ConfigResolver(Protocol):
    def get(self, key: str) -> Any:
        """Return the value stored at ``key``; raise LookupError if absent."""
        ...


@dataclass(frozen=True, slots=True)
class Resolvers:
    """The collaborators validation consults."""

    pools: PoolResolver
    teams: TeamResolver
    config: ConfigResolver


def volume_plan_key(plan_name: str, provisioner: str) -> str:
    return f"volume-plans:{plan_name}:{provisioner}"


def resolve_plan(volume: Volume, resolvers: Resolvers) -> VolumePlan:
    """
    Resolve the plan options of ``volume``.

    Lookups happen in a fixed order: pool, team, provisioner, plan config.
    An empty volume name fails before any lookup.

    Raises:
        EmptyNameError: If the volume has no name
        PoolResolutionError: If the pool is unknown
        TeamResolutionError: If the owning team does not exist
        ProvisionerResolutionError: If the pool has no provisioner
        PlanConfigError: If the plan config is missing or not a mapping
    """
    if volume.name == "":
        raise EmptyNameError()

    try:
        pool = resolvers.pools.get_pool(volume.pool)
    except LookupError as exc:
        raise PoolResolutionError(f"pool {volume.pool!r} not found") from exc

    if not resolvers.teams.team_exists(volume.team_owner):
        raise TeamResolutionError(f"team {volume.team_owner!r} not found")

    if not pool.provisioner:
        raise ProvisionerResolutionError(f"pool {pool.name!r} has no provisioner")

    key = volume_plan_key(volume.plan.name, pool.provisioner)
    try:
        data = resolvers.config.get(key)
    except LookupError as exc:
        raise PlanConfigError(f"plan config {key!r} not found") from exc

    opts = convert_entries(data)
    if not isinstance(opts, Mapping):
        raise PlanConfigError(
            f"invalid type for plan opts at {key!r}: {type(opts).__name__}"
        )
    return VolumePlan(name=volume.plan.name, opts=dict(opts))


def validate_volume(volume: Volume, resolvers: Resolvers) -> Volume:
    """Validate ``volume`` and return a copy carrying the resolved plan.

    The given instance is left untouched.
    """
    return volume.with_plan(resolve_plan(volume, resolvers))
