"""
Pipeline Runner Module
======================

Plans one route for a configuration, then renders and exports it.
"""

import json
import time
import traceback
import numpy as np
from pathlib import Path
from typing import Dict, Optional, Any
from dataclasses import dataclass, field

from ..config import Config
from ..terrain import HeightField
from ..planning import RoutePlanner, Route, PlanningError
from ..metrics import RouteMetrics
from ..visualization import RouteRenderer


@dataclass
class RunResult:
    """Result from a single planning run"""
    seed: int
    status: str = 'pending'
    route: Optional[Route] = field(default=None, repr=False)
    metrics: Optional[RouteMetrics] = None
    stats: Dict[str, Any] = field(default_factory=dict)
    runtime_sec: float = 0.0
    assets: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == 'success'

    def to_dict(self) -> Dict:
        return {
            'seed': self.seed,
            'status': self.status,
            'runtime_sec': round(self.runtime_sec, 4),
            'stats': self.stats,
            'metrics': self.metrics.to_dict() if self.metrics else None,
            'route': [
                {'position': list(s.position), 'elevation': s.elevation, 'heading': s.heading}
                for s in self.route
            ] if self.route else None,
            'assets': self.assets,
            'error': self.error,
        }


class RouteRunner:
    """
    Runs the height field -> planner -> renderer pipeline.

    A planning failure is recorded on the result (status 'failed') and
    nothing is rendered; there is no partial route.
    """

    def __init__(self, config: Optional[Config] = None, height_field=None):
        """
        Initialize runner.

        Args:
            config: Configuration object (uses default if None)
            height_field: Terrain override (seeded HeightField if None)
        """
        self.config = config or Config()
        self.height_field = height_field or HeightField(self.config.terrain)
        self.planner = RoutePlanner(self.height_field, self.config)
        self.renderer = RouteRenderer(self.height_field, self.config.map,
                                      self.config.visualization)

    def run(self,
            output_dir: Optional[str] = None,
            save_assets: bool = True,
            verbose: Optional[bool] = None) -> RunResult:
        """
        Plan, measure and optionally export a route.

        Args:
            output_dir: Directory for image, route and logs
            save_assets: Whether to write the image and route arrays
            verbose: Print progress (defaults to config.verbose)

        Returns:
            RunResult describing the run
        """
        if verbose is None:
            verbose = self.config.verbose
        seed = self.config.terrain.seed
        result = RunResult(seed=seed)

        out_dir = Path(output_dir) if output_dir else None
        if out_dir is not None:
            out_dir.mkdir(parents=True, exist_ok=True)

        if verbose:
            start = self.planner.start_state()
            print(f"[Seed {seed}] Planning from {start.position} to x >= {self.config.map.width} "
                  f"(max turn {self.config.motion.max_turn_deg} deg, "
                  f"leg {self.config.motion.leg_distance} m)")

        t0 = time.perf_counter()
        try:
            route = self.planner.plan()
            result.runtime_sec = time.perf_counter() - t0
            result.route = route
            result.metrics = RouteMetrics.from_route(
                route,
                self.config.motion.leg_distance,
                self.config.cost.height_multiplier,
            )
            result.status = 'success'

            if verbose:
                print(f"[Seed {seed}] Route found: {route.num_steps} steps, "
                      f"cost {route.total_cost} ({result.runtime_sec:.2f}s)")

            if save_assets and out_dir is not None:
                result.assets = self._save_assets(route, out_dir)
                if verbose:
                    print(f"[Seed {seed}] Image saved to {result.assets['image']}")

        except PlanningError as e:
            result.runtime_sec = time.perf_counter() - t0
            result.status = 'failed'
            result.error = str(e)
            if verbose:
                print(f"[Seed {seed}] PLANNING FAILED: {e}")

        except Exception as e:
            result.runtime_sec = time.perf_counter() - t0
            result.status = 'error'
            result.error = str(e)
            if verbose:
                print(f"[Seed {seed}] ERROR: {e}")
                traceback.print_exc()

        if self.planner.last_stats is not None:
            result.stats = vars(self.planner.last_stats).copy()

        if out_dir is not None:
            with open(out_dir / 'logs.json', 'w') as f:
                json.dump({'config': self.config.to_dict(), **result.to_dict()},
                          f, indent=2, default=str)

        return result

    def _save_assets(self, route: Route, out_dir: Path) -> Dict[str, str]:
        image_path = self.renderer.save(route, out_dir / self.config.visualization.image_name)

        route_path = out_dir / 'route.npz'
        np.savez_compressed(
            str(route_path),
            positions=np.array(route.positions, dtype=np.int64),
            elevations=np.array([s.elevation for s in route], dtype=np.int64),
            headings=np.array([s.heading for s in route], dtype=np.int64),
            edge_costs=np.array(route.edge_costs, dtype=np.int64),
        )

        return {'image': str(image_path), 'route': str(route_path)}

    def render_terrain(self, output_dir: str) -> Path:
        """Save the terrain background without planning"""
        return self.renderer.save(None, Path(output_dir) / 'terrain.png')
