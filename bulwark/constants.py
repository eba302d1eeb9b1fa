from __future__ import annotations

# ==============================================================================
# Canvas
# ==============================================================================

# Logical canvas the renderer draws into. Pointer input is mapped into this
# space before it reaches the simulation.
CANVAS_WIDTH = 3840.0
CANVAS_HEIGHT = 2160.0

# ==============================================================================
# Terrain
# ==============================================================================

# Flat ground level (canvas y grows downwards, so "below ground" is y >= this).
GROUND_Y = 2060.0

# Two symmetric triangular mountains, given as (left, right) x spans.
# Apex is the midpoint, slopes are 1:1, so each peak rises 200 units.
LEFT_PEAK_SPAN = (200.0, 600.0)
RIGHT_PEAK_SPAN = (3240.0, 3640.0)

# Polyline overhang used to close the silhouette below the canvas edges.
SILHOUETTE_OVERHANG = 10.0

# ==============================================================================
# Explosions
# ==============================================================================

BLAST_INITIAL_RADIUS = 10.0
BLAST_RADIUS_STEP = 10.0  # Per tick, both phases
BLAST_MAX_RADIUS = 300.0

# ==============================================================================
# Missiles
# ==============================================================================

MISSILE_VX_MAX = 1.5  # |vx| bound, canvas units per tick
MISSILE_VY_MIN = 3.0
MISSILE_VY_MAX = 6.0
IMPACT_FLASH_S = 0.5  # Impacted missiles linger this long
FLASH_RADIUS_MAX = 300.0

# ==============================================================================
# Spawning
# ==============================================================================

INITIAL_MISSILES = 5
SPAWN_PROBABILITY = 0.01  # Per tick

# Nominal host refresh rate. Physics is per tick, not per second.
NOMINAL_FRAME_RATE = 60.0
