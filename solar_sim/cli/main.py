"""CLI main entry point."""

import argparse
import sys
from solar_sim.physics.simulator import Simulator
from solar_sim.physics.integrators import INTEGRATORS, get_integrator
from solar_sim.presets import PRESETS, get_preset
from solar_sim.utils.config import SimulationConfig, load_config


def build_config(args) -> SimulationConfig:
    """Merge an optional config file with command line overrides."""
    config = load_config(args.config) if args.config else SimulationConfig()
    return config.with_overrides(
        preset=args.preset,
        dt=args.dt,
        time_scale=args.time_scale,
        integrator=args.integrator,
        history_capacity=args.history,
        G=args.G,
        AU=args.AU,
    )


def print_orbit_table(sim: Simulator, frame: int):
    """Print one row per orbiter."""
    elements = sim.get_orbital_elements()
    for i, body in enumerate(sim.registry.orbiters):
        print(
            f"{frame:<8} {i + 1:<4} {elements['radius'][i]:<12.3f} {elements['speed'][i]:<12.4e} "
            f"{elements['energy'][i]:<12.4e} {len(body.orbit_history):<6}"
        )


def run_simulation(args):
    """Run a headless simulation."""
    config = build_config(args)
    integrator = get_integrator(config.integrator)

    preset = get_preset(config.preset, config, **config.preset_params)
    registry = preset.build()
    sim = Simulator(registry, config, integrator)

    print(f"Running simulation: {preset.name} with {len(registry.orbiters)} orbiters")
    print(f"Integrator: {integrator.name}, dt: {config.dt:.6f}, time_scale: {config.time_scale:g}, G: {config.G:g}")
    print(f"{'Frame':<8} {'Body':<4} {'r':<12} {'|v|':<12} {'e':<12} {'Trail':<6}")
    print("-" * 60)
    print_orbit_table(sim, 0)

    for frame in range(1, args.frames + 1):
        sim.step()
        if frame % args.debug_every == 0:
            print_orbit_table(sim, frame)

    print(f"Simulated time: {sim.time:.1f} s over {sim.step_count} frames")
    print("Simulation complete!")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Solar Simulator - fixed anchor with orbiting bodies")

    parser.add_argument('--config', type=str, default=None,
                        help='Configuration file (.json or .yaml)')
    parser.add_argument('--preset', type=str, default=None,
                        choices=list(PRESETS.keys()),
                        help='Preset scenario (default: solar_system)')
    parser.add_argument('--frames', type=int, default=600,
                        help='Number of frames to simulate')
    parser.add_argument('--dt', type=float, default=None,
                        help='Real time per frame in seconds (default: 1/60)')
    parser.add_argument('--time-scale', type=float, default=None,
                        help='Simulated seconds per real second (default: 100000)')
    parser.add_argument('--integrator', type=str, default=None,
                        choices=list(INTEGRATORS.keys()),
                        help='Numerical integrator (default: semi_implicit_euler)')
    parser.add_argument('--history', type=int, default=None,
                        help='Orbit history length per body (default: 200)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant of the model (default: 6.67e-11)')
    parser.add_argument('--AU', type=float, default=None,
                        help='Simulation units per AU (default: 100)')
    parser.add_argument('--debug-every', type=int, default=60,
                        help='Print the orbit table every N frames')
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in PRESETS:
            print(f"  - {name}")
        return

    if args.debug_every < 1:
        print(f"--debug-every must be >= 1, got {args.debug_every}")
        sys.exit(1)

    try:
        run_simulation(args)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)


if __name__ == '__main__':
    main()
