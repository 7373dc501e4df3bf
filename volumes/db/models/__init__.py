from volumes.db.models.pool import Pool
from volumes.db.models.team import Team
from volumes.db.models.volume import Volume
from volumes.db.models.volume_bind import VolumeBind

__all__ = ["Pool", "Team", "Volume", "VolumeBind"]
