#!/usr/bin/env python3
"""
Slope Route Planner - Main Entry Point
======================================

Usage:
    # Plan and render a route with the default terrain
    python -m slope_route.main plan --seed 0 --output assets

    # Tighter turning, smaller canvas, verbose progress
    python -m slope_route.main plan --max-turn 3 --width 256 --height 256 -v

    # Render the terrain background only
    python -m slope_route.main terrain --output assets

From Python:
    from slope_route import Config, RouteRunner

    result = RouteRunner(Config()).run(output_dir='assets')
"""

import argparse
import sys


def build_config(args):
    """Config from CLI arguments"""
    from slope_route.config import (
        Config, TerrainConfig, MotionConfig, MapConfig, SearchConfig,
    )

    return Config(
        terrain=TerrainConfig(
            seed=args.seed,
            noise_scale=args.noise_scale,
            amplitude=args.amplitude,
        ),
        motion=MotionConfig(
            max_turn_deg=getattr(args, 'max_turn', 5),
            leg_distance=getattr(args, 'leg', 20.0),
            signed_heading=getattr(args, 'signed_heading', False),
        ),
        map=MapConfig(width=args.width, height=args.height),
        search=SearchConfig(
            heuristic_weight=getattr(args, 'heuristic_weight', 1.0),
            max_expansions=getattr(args, 'max_expansions', None) or None,
        ),
        verbose=getattr(args, 'verbose', False),
    )


def run_plan(args):
    """Plan a single route and save the image"""
    from slope_route import RouteRunner

    config = build_config(args)
    runner = RouteRunner(config)
    result = runner.run(output_dir=args.output, save_assets=not args.no_save)

    print("\n" + "=" * 60)
    print(f"ROUTE RESULT (seed={result.seed})")
    print("=" * 60)

    if result.success:
        m = result.metrics
        print(f"✓ steps={m.num_steps}  cost={m.total_cost}  "
              f"climb={m.total_climb:.2f} m  descent={m.total_descent:.2f} m")
        print(f"  expansions={result.stats.get('expansions')}  "
              f"runtime={result.runtime_sec:.2f}s")
        if result.assets:
            print(f"  image: {result.assets['image']}")
    else:
        print(f"✗ {result.status}: {result.error}")

    print("=" * 60)

    return 0 if result.success else 1


def run_terrain(args):
    """Render the terrain background without planning"""
    from slope_route import RouteRunner

    config = build_config(args)
    path = RouteRunner(config).render_terrain(args.output)
    print(f"Terrain saved to: {path}")
    return 0


def _add_terrain_args(parser):
    parser.add_argument('--seed', type=int, default=0, help='Noise seed')
    parser.add_argument('--noise_scale', '--noise-scale', type=float, default=100.0,
                        help='World units per noise unit')
    parser.add_argument('--amplitude', type=float, default=10.0, help='Terrain amplitude (m)')
    parser.add_argument('--width', type=int, default=512, help='Canvas width (px)')
    parser.add_argument('--height', type=int, default=512, help='Canvas height (px)')
    parser.add_argument('--output', type=str, default='assets', help='Output directory')


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Slope Route Planner',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Plan command
    plan_parser = subparsers.add_parser('plan', help='Plan and render a route')
    _add_terrain_args(plan_parser)
    plan_parser.add_argument('--max-turn', '--max_turn', dest='max_turn', type=int, default=5,
                             help='Max heading change per step (deg)')
    plan_parser.add_argument('--leg', type=float, default=20.0, help='Step distance (m)')
    plan_parser.add_argument('--signed-heading', dest='signed_heading', action='store_true',
                             help='Derive headings with atan2 (keeps turn direction)')
    plan_parser.add_argument('--heuristic-weight', dest='heuristic_weight', type=float,
                             default=1.0, help='Heuristic multiplier (0 = uniform-cost search)')
    plan_parser.add_argument('--max-expansions', dest='max_expansions', type=int,
                             default=5_000_000, help='Expansion safety bound (0 disables)')
    plan_parser.add_argument('--no-save', '--no_save', dest='no_save', action='store_true',
                             help='Do not save assets')
    plan_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    # Terrain command
    terrain_parser = subparsers.add_parser('terrain', help='Render terrain only')
    _add_terrain_args(terrain_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'plan':
        return run_plan(args)
    elif args.command == 'terrain':
        return run_terrain(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
