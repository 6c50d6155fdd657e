"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout celestjax.  The default is ``jnp.float32`` for GPU/TPU
compatibility.  Switching to ``jnp.float64`` automatically enables
JAX's 64-bit mode (``jax_enable_x64``).

Call ``set_dtype`` **before** constructing any directions or circles.
Values already created keep the dtype they were built with.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for celestjax.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype


def get_geometry_epsilon() -> float:
    """Return the dtype-adaptive tolerance for spherical geometry tests.

    Used when deciding whether two directions are equal or antipodal,
    whether a direction lies on a great circle, and whether two planes
    coincide.  The tolerance scales with the precision of the configured
    float dtype:

    - ``float64``:  1e-12
    - ``float32``:  1e-6
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Absolute tolerance on unit-vector quantities.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3
