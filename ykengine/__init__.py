"""Game engine utilities: vector and matrix math, collision tests, interpolation,
tunable values, level files, fades, animation, a thread pool, scenes and colliders."""

__version__ = "0.1.0"