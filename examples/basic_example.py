"""Basic example of using the solar simulator."""

from solar_sim import Simulator, SimulationConfig, bodies
from solar_sim.presets import SolarSystem

def main():
    """Run the solar system preset for ten simulated seconds of frames."""
    config = SimulationConfig()

    # Sun at the center, eight planets on circular orbits
    registry = SolarSystem(config).build()

    sim = Simulator(registry, config)

    print("Running simulation...")
    for frame in range(600):
        sim.step()
        if frame % 120 == 0:
            elements = sim.get_orbital_elements()
            print(f"Frame {frame}: Time={sim.time:.0f}, Earth r={elements['radius'][2]:.3f}")

    # What a renderer would draw: circles plus trailing polylines
    for view in bodies(registry):
        print(f"{view.color}: position={view.position.round(2).tolist()}, trail={len(view.orbit_history)}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
