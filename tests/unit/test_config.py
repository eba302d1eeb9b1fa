import pytest

from bulwark.config import ExplosionConfig, MissileConfig, SimConfig
from bulwark.settings import Settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BULWARK_SEED", "17")
    monkeypatch.setenv("BULWARK_SPAWN_PROBABILITY", "0.05")
    monkeypatch.setenv("BULWARK_INITIAL_MISSILES", "2")
    cfg = SimConfig.from_settings(Settings())
    assert cfg.seed == 17
    assert cfg.spawn.probability == 0.05
    assert cfg.spawn.initial_count == 2


def test_settings_defaults(monkeypatch):
    for name in ("SEED", "SPAWN_PROBABILITY", "INITIAL_MISSILES", "FRAME_RATE"):
        monkeypatch.delenv(f"BULWARK_{name}", raising=False)
    s = Settings(_env_file=None)
    assert s.SEED is None
    assert s.INITIAL_MISSILES == 5
    assert s.FRAME_RATE == 60.0


def test_invalid_configs():
    with pytest.raises(ValueError):
        ExplosionConfig(radius_step=0.0)
    with pytest.raises(ValueError):
        ExplosionConfig(initial_radius=300.0)
    with pytest.raises(ValueError):
        MissileConfig(vy_min=6.0, vy_max=3.0)


def test_negative_flash_radius_rejected():
    with pytest.raises(ValueError, match="flash_radius_max"):
        MissileConfig(flash_radius_max=-1.0)
    assert MissileConfig(flash_radius_max=0.0).flash_radius_max == 0.0
