"""Basic example: run the figure-eight orbit headless and watch the energy."""

from pathlib import Path

from gravity_sandbox import SimulationState, load_bodies
from gravity_sandbox.physics.diagnostics import Diagnostics


def main():
    """Run 2000 ticks of the figure-eight three-body orbit."""
    bodies = load_bodies(Path(__file__).parent / "config.json")
    
    sim = SimulationState(bodies)
    diagnostics = Diagnostics()
    
    print("Running simulation...")
    print(f"Initial energy: {diagnostics.total_energy(sim.bodies):.6f}")
    
    for step in range(2000):
        sim.step()
        if step % 500 == 0:
            energy = diagnostics.total_energy(sim.bodies)
            print(f"Step {step}: Energy={energy:.6f}, Momentum={diagnostics.momentum(sim.bodies)}")
    
    print(f"Final energy: {diagnostics.total_energy(sim.bodies):.6f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
