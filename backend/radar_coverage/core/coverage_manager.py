"""
Coverage Merge Orchestrator.

Owns the sensor set and terrain model, and memoizes the merged coverage
map until something that affects it changes.
"""
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import List, Optional
import threading
import logging

from radar_coverage.core.boundary_processor import BoundaryProcessor
from radar_coverage.core.clipping_engine import ClippingEngine, ShapelyClippingEngine
from radar_coverage.core.coverage_generator import CoverageGenerator
from radar_coverage.core.ray_caster import VisibilityRayCaster
from radar_coverage.core.region_classifier import PolygonBoolean
from radar_coverage.core.terrain_model import ElevationFunction, TerrainModel
from radar_coverage.geometry import CoverageMap, Ring, area, perimeter
from radar_coverage.models import CoverageSettings, CoverageStats, Sensor, TerrainObstacle

logger = logging.getLogger(__name__)


class CacheState(Enum):
    FRESH = "fresh"
    STALE = "stale"


class CoverageMergeManager:
    """Merge per-sensor coverage into a cached coverage map."""

    def __init__(
        self,
        settings: Optional[CoverageSettings] = None,
        engine: Optional[ClippingEngine] = None
    ):
        """
        Initialize coverage merge manager.

        Args:
            settings: Generation and post-processing parameters. The manager
                keeps its own copy; change them with update_settings().
            engine: Clipping engine for union and simplification (Shapely by default)
        """
        self._settings = (settings if settings is not None else CoverageSettings()).model_copy()
        self.engine = engine if engine is not None else ShapelyClippingEngine()

        self._terrain = TerrainModel(
            earth_radius_m=self._settings.earth_radius_m,
            curvature_factor=self._settings.curvature_factor,
            num_samples=self._settings.los_samples
        )
        self._sensors: List[Sensor] = []
        self._individual_coverages: List[Ring] = []
        self._merged_coverage: CoverageMap = []
        self._state = CacheState.STALE
        self._lock = threading.RLock()

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def settings(self) -> CoverageSettings:
        """Snapshot of the current parameters. Edits to it do not reach the manager."""
        with self._lock:
            return self._settings.model_copy()

    @property
    def terrain(self) -> TerrainModel:
        """Terrain model. Mutate it through the manager so the cache is invalidated."""
        return self._terrain

    @property
    def sensors(self) -> List[Sensor]:
        with self._lock:
            return list(self._sensors)

    def invalidate(self):
        with self._lock:
            self._state = CacheState.STALE

    # Sensor set

    def add_sensor(self, sensor: Sensor):
        with self._lock:
            self._sensors.append(sensor)
            self._state = CacheState.STALE
        logger.info(f"Added sensor {sensor.id} ({sensor.name})")

    def update_sensor(self, sensor_id: int, sensor: Sensor) -> bool:
        """
        Replace the first sensor with the given id.

        Returns:
            False if no sensor has that id (nothing changes)
        """
        with self._lock:
            for idx, existing in enumerate(self._sensors):
                if existing.id == sensor_id:
                    self._sensors[idx] = sensor
                    self._state = CacheState.STALE
                    return True

        logger.warning(f"Cannot update sensor {sensor_id}: not found")
        return False

    def remove_sensor(self, sensor_id: int) -> bool:
        """
        Remove every sensor with the given id.

        Returns:
            True if anything was removed
        """
        with self._lock:
            kept = [s for s in self._sensors if s.id != sensor_id]
            if len(kept) == len(self._sensors):
                return False
            self._sensors = kept
            self._state = CacheState.STALE
        return True

    def clear_sensors(self):
        with self._lock:
            self._sensors.clear()
            self._state = CacheState.STALE

    # Terrain

    def add_obstacle(self, obstacle: TerrainObstacle):
        with self._lock:
            self._terrain.add_obstacle(obstacle)
            self._state = CacheState.STALE

    def remove_obstacle(self, name: str) -> bool:
        with self._lock:
            removed = self._terrain.remove_obstacle(name)
            if removed:
                self._state = CacheState.STALE
        return removed

    def clear_obstacles(self):
        with self._lock:
            self._terrain.clear_obstacles()
            self._state = CacheState.STALE

    def set_elevation_function(self, func: Optional[ElevationFunction]):
        with self._lock:
            self._terrain.set_elevation_function(func)
            self._state = CacheState.STALE

    # Generation parameters

    def update_settings(self, **changes):
        """
        Change one or more generation parameters.

        The new values are validated together before anything is applied,
        so a rejected change leaves both the settings and the cache as they were.

        Args:
            **changes: CoverageSettings field names and new values

        Raises:
            ValueError: If a name is not a CoverageSettings field
            ValidationError: If a value violates its constraint
        """
        unknown = set(changes) - set(CoverageSettings.model_fields)
        if unknown:
            raise ValueError(f"Unknown coverage settings: {', '.join(sorted(unknown))}")

        with self._lock:
            settings = CoverageSettings.model_validate({**self._settings.model_dump(), **changes})

            self._settings = settings
            self._terrain.earth_radius_m = settings.earth_radius_m
            self._terrain.curvature_factor = settings.curvature_factor
            self._terrain.num_samples = settings.los_samples
            self._state = CacheState.STALE

        logger.info(f"Updated coverage settings: {changes}")

    def set_num_rays(self, num_rays: int):
        self.update_settings(num_rays=num_rays)

    def set_simplify_tolerance(self, tolerance: float):
        self.update_settings(simplify_tolerance=tolerance)

    def set_smooth_iterations(self, iterations: int):
        self.update_settings(smooth_iterations=iterations)

    # Reads

    def get_individual_coverages(self) -> List[Ring]:
        with self._lock:
            self._update_if_stale()
            return list(self._individual_coverages)

    def get_merged_coverage(self) -> CoverageMap:
        with self._lock:
            self._update_if_stale()
            return list(self._merged_coverage)

    def get_stats(self) -> CoverageStats:
        with self._lock:
            self._update_if_stale()
            return self.calculate_statistics(self._merged_coverage)

    @staticmethod
    def calculate_statistics(coverage: CoverageMap) -> CoverageStats:
        """
        Aggregate region, hole, area and perimeter totals.

        Args:
            coverage: Coverage map

        Returns:
            CoverageStats with area net of holes
        """
        total_area = 0.0
        total_perimeter = 0.0
        hole_count = 0

        for region in coverage:
            hole_area = sum(area(h) for h in region.holes)
            total_area += area(region.outer) - hole_area
            total_perimeter += perimeter(region.outer) + sum(perimeter(h) for h in region.holes)
            hole_count += len(region.holes)

        return CoverageStats(
            region_count=len(coverage),
            total_hole_count=hole_count,
            total_area=total_area,
            total_perimeter=total_perimeter
        )

    def _update_if_stale(self):
        if self._state is CacheState.FRESH:
            return

        sensors = list(self._sensors)
        logger.info(f"Recomputing coverage for {len(sensors)} sensors...")

        generated = self._generate_rings(sensors)

        rings = []
        usable = []
        for sensor, ring in zip(sensors, generated):
            if ring is None:
                continue
            rings.append(ring)
            if sensor.range <= 0 or len(ring) < 3 or area(ring) == 0.0:
                logger.warning(
                    f"Sensor {sensor.id} ({sensor.name}) produced a degenerate coverage ring "
                    f"(range={sensor.range}), omitting it from the merge"
                )
                continue
            usable.append(ring)

        try:
            merged = PolygonBoolean(self.engine).union_all(usable)
            merged = BoundaryProcessor(self.engine).process(
                merged,
                self._settings.simplify_tolerance,
                self._settings.smooth_iterations
            )
        except Exception as e:
            logger.error(f"Coverage merge failed, returning empty coverage: {e}", exc_info=True)
            merged = []

        self._individual_coverages = rings
        self._merged_coverage = merged
        self._state = CacheState.FRESH

        logger.info(
            f"Merged {len(usable)}/{len(sensors)} coverage rings into "
            f"{len(merged)} region(s) with {sum(len(r.holes) for r in merged)} hole(s)"
        )

    def _generate_rings(self, sensors: List[Sensor]) -> List[Optional[Ring]]:
        """
        Generate coverage rings, in parallel when more than one sensor is present.

        Returns:
            One entry per sensor, None where generation raised
        """
        generator = CoverageGenerator(
            VisibilityRayCaster(self._terrain, self._settings.range_tolerance),
            self._settings.num_rays
        )

        def generate(sensor: Sensor) -> Optional[Ring]:
            try:
                return generator.generate(sensor)
            except Exception as e:
                logger.error(
                    f"Coverage generation failed for sensor {sensor.id} ({sensor.name}), "
                    f"omitting it: {e}",
                    exc_info=True
                )
                return None

        if self._settings.max_workers > 1 and len(sensors) > 1:
            with ThreadPoolExecutor(max_workers=self._settings.max_workers) as executor:
                return list(executor.map(generate, sensors))

        return [generate(sensor) for sensor in sensors]
