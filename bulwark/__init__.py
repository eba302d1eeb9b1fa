from .config import ExplosionConfig, MissileConfig, SimConfig, SpawnConfig, TerrainConfig
from .host import FrameQueue, ViewportMapper
from .sim.context import ManualClock, SimulationContext
from .sim.explosion import Explosion, ExplosionManager
from .sim.loop import SimulationLoop
from .sim.missile import Missile
from .sim.projectile import ProjectileSimulator
from .sim.snapshot import Snapshot
from .sim.spawner import EntitySpawner
from .sim.terrain import TerrainProfile

__all__ = [
    "EntitySpawner",
    "Explosion",
    "ExplosionConfig",
    "ExplosionManager",
    "FrameQueue",
    "ManualClock",
    "Missile",
    "MissileConfig",
    "ProjectileSimulator",
    "SimConfig",
    "SimulationContext",
    "SimulationLoop",
    "Snapshot",
    "SpawnConfig",
    "TerrainConfig",
    "TerrainProfile",
    "ViewportMapper",
]
