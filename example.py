#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import FrameInput, LifeEngine, PatternLibrary


def main():
    """Drive an engine the way a host frame loop would."""
    engine = LifeEngine(20, 20, generation_interval=0.25, populate=False)

    glider = PatternLibrary().get_pattern("Glider")
    engine.load_pattern(glider, offset_x=8, offset_y=8)

    print("Initial state:")
    print(engine.grid)
    print(f"Population: {engine.population}")
    print()

    # Ten frames of a tenth of a second each
    for frame in range(10):
        advanced = engine.update(0.1)
        if advanced:
            print(f"Frame {frame}: generation {engine.generation}")

    # Pause, then step by hand
    engine.update(0.0, FrameInput(toggle_pause=True))
    engine.update(5.0)
    engine.update(0.0, FrameInput(step=True))
    print(f"\nPaused and stepped to generation {engine.generation}:")
    print(engine.grid)

    print("\nFinal statistics:")
    for key, value in engine.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
