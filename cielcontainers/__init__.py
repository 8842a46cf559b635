"""Fixed-capacity and growable vectors, a reference-counting control block and observer pointers."""

__version__ = "0.1.0"

__all__ = [
    "control_block",
    "inplace_base",
    "inplace_vector",
    "observer_ptr",
    "vector",
    "vector_base",
]