"""
Coverage configuration and result models.
"""
from pydantic import BaseModel, ConfigDict, Field


class CoverageSettings(BaseModel):
    """Generation and post-processing parameters for a merge cycle."""
    num_rays: int = Field(default=72, gt=0, description="Bearings sampled per sensor")
    simplify_tolerance: float = Field(default=5.0, ge=0, description="Simplification tolerance (0 disables)")
    smooth_iterations: int = Field(default=1, ge=0, description="Corner-cutting passes (0 disables)")
    los_samples: int = Field(default=40, ge=2, description="Interior samples per line-of-sight test")
    earth_radius_m: float = Field(default=6371000.0, gt=0)
    curvature_factor: float = Field(default=0.5, ge=0, description="Scale applied to the curvature drop")
    range_tolerance: float = Field(default=0.01, gt=0, lt=1, description="Binary search stop, fraction of max range")
    max_workers: int = Field(default=4, ge=1, description="Threads for per-sensor generation")

    model_config = ConfigDict(validate_assignment=True)


class CoverageStats(BaseModel):
    """Aggregate measures of a merged coverage map."""
    region_count: int = 0
    total_hole_count: int = 0
    total_area: float = 0.0
    total_perimeter: float = 0.0
