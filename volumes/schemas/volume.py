from pydantic import BaseModel, Field

from volumes.domain.volume import Volume, VolumePlan


class PlanRef(BaseModel):
    name: str


class VolumeCreate(BaseModel):
    name: str
    pool: str
    plan: PlanRef
    team_owner: str
    status: str = ""
    opts: dict[str, str] | None = None

    def to_entity(self) -> Volume:
        # Plan options are always resolved server-side.
        return Volume(
            name=self.name,
            pool=self.pool,
            plan=VolumePlan(name=self.plan.name),
            team_owner=self.team_owner,
            status=self.status,
            opts=self.opts,
        )


class BindCreate(BaseModel):
    app: str = Field(..., min_length=1)
    mount_point: str = Field(..., min_length=1)
    # Checked by BindMode.parse so the error names both valid modes
    mode: str | None = None
