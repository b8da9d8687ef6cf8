"""PyTree registration utilities for algebra values and field containers."""

from typing import Any

import jax


def register_complex_pytree(Complex):
    """Register the complex value type so it can cross ``jax.jit`` boundaries."""

    def complex_tree_flatten(z: Any) -> tuple[tuple[Any, ...], None]:
        """Flatten Complex into its real and imaginary parts."""
        return (z.re, z.im), None

    def complex_tree_unflatten(_: None, children: tuple[Any, ...]) -> Any:
        """Rebuild Complex without re-validating traced children."""
        re, im = children
        z = object.__new__(Complex)
        object.__setattr__(z, "re", re)
        object.__setattr__(z, "im", im)
        return z

    jax.tree_util.register_pytree_node(
        Complex, complex_tree_flatten, complex_tree_unflatten
    )


def register_container_pytree(container_type):
    """Register a fixed-length container type.

    The backing array is the only child; the length is recovered from the
    array itself, so no auxiliary data is needed.
    """

    def container_tree_flatten(container: Any) -> tuple[tuple[Any, ...], None]:
        """Flatten a container for pytree operations."""
        return (container.data,), None

    def container_tree_unflatten(_: None, children: tuple[Any, ...]) -> Any:
        """Unflatten a container, bypassing construction-time checks."""
        (data,) = children
        container = container_type.__new__(container_type)
        container._data = data
        return container

    jax.tree_util.register_pytree_node(
        container_type, container_tree_flatten, container_tree_unflatten
    )
