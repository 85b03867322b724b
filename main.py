#!/usr/bin/env python3
"""
Fleet Operations Dashboard

Entry point for running the telemetry simulation and notification engine.

Usage:
    python main.py                   # Run with visualization
    python main.py --no-viz          # Run without visualization
    python main.py --no-viz --fast   # Headless, as fast as possible
    python main.py --status active   # Only show active missions
    python main.py --help            # Show help
"""

import argparse
import random
import sys
import time

import config
from dashboard import Dashboard
from queries import STATUS_FILTERS
from scheduler import SimulatedClock


def main():
    parser = argparse.ArgumentParser(
        description='Fleet Operations Dashboard - Telemetry Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                        Run with visualization
  python main.py --no-viz --fast        Headless run on a simulated clock
  python main.py --seed 42 --time 600   Reproducible 10 minute run
  python main.py --query phoenix        Search missions by name or ID
  python main.py --status active        Filter missions by status
        """
    )

    parser.add_argument(
        '--no-viz', action='store_true',
        help='Run without matplotlib visualization'
    )
    parser.add_argument(
        '--time', type=float, default=120.0,
        help='Maximum run time in seconds (default: 120)'
    )
    parser.add_argument(
        '--fast', action='store_true',
        help='Run as fast as possible on a simulated clock (not real-time)'
    )
    parser.add_argument(
        '--tick', type=float, default=config.TICK_INTERVAL,
        help=f'Seconds between telemetry ticks (default: {config.TICK_INTERVAL})'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for reproducible telemetry'
    )
    parser.add_argument(
        '--query', type=str, default='',
        help='Mission search text (name or ID, case-insensitive)'
    )
    parser.add_argument(
        '--status', choices=STATUS_FILTERS, default=config.STATUS_FILTER_ALL,
        help='Mission status filter (default: all)'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='Print per-tick telemetry'
    )

    args = parser.parse_args()

    if args.tick <= 0:
        print(f"Error: Invalid tick interval {args.tick} (must be > 0)")
        sys.exit(1)

    # Print configuration
    print("=" * 50)
    print("NEXUS COMMAND CENTER")
    print("=" * 50)
    print(f"Clock: {'simulated' if args.fast else 'real-time'}")
    print(f"Tick interval: {args.tick}s")
    print(f"Toast duration: {config.TOAST_DURATION}s")
    print(f"Max run time: {args.time}s")
    print(f"Seed: {args.seed if args.seed is not None else 'random'}")
    print("=" * 50)

    dashboard = Dashboard(
        rng=random.Random(args.seed),
        clock=SimulatedClock() if args.fast else time.monotonic,
        tick_interval=args.tick,
        query=args.query,
        status_filter=args.status,
        debug=args.debug
    )

    try:
        result = dashboard.run(max_time=args.time, show_animation=not args.no_viz)

        print("\nFinal Results:")
        print(f"  Run time: {result['final_time']:.1f}s")
        print(f"  Ticks: {result['status']['ticks']}")
        print(f"  Filtered missions: {', '.join(result['status']['filtered']) or '(none)'}")

    except KeyboardInterrupt:
        dashboard.unmount()
        print("\n\nDashboard interrupted by user")
        sys.exit(0)


if __name__ == '__main__':
    main()
