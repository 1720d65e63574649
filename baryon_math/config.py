from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterator, Mapping, Optional

import numpy as np

logger = logging.getLogger(__name__)


class FloatAction(str, Enum):
    """
    How numpy reports an IEEE-754 edge case met during vector arithmetic.

    Notes
    -----
    Vector operations are total: NaN and Infinity always propagate. The only choice
    is whether numpy stays silent or emits a RuntimeWarning; "raise" and "call"
    are not accepted.
    """
    IGNORE = "ignore"
    WARN = "warn"


_CATEGORIES = ("divide", "over", "under", "invalid")


@dataclass(frozen=True, slots=True)
class FloatPolicy:
    """
    Floating-point error reporting used by the elementwise engine.

    Parameters
    ----------
    divide
        Division by zero (finite / 0.0 -> +/-inf).
    over
        Overflow (result or float32 rounding out of range -> +/-inf).
    under
        Underflow (result rounds to a subnormal or zero).
    invalid
        Invalid operation (0.0 / 0.0, inf - inf -> NaN).
    """
    divide: FloatAction = FloatAction.IGNORE
    over: FloatAction = FloatAction.IGNORE
    under: FloatAction = FloatAction.IGNORE
    invalid: FloatAction = FloatAction.IGNORE

    def __post_init__(self) -> None:
        for name in _CATEGORIES:
            value = getattr(self, name)
            try:
                action = FloatAction(value)
            except ValueError as e:
                raise ValueError(
                    f"float_policy.{name} must be one of {[a.value for a in FloatAction]}, got {value!r}."
                ) from e
            object.__setattr__(self, name, action)

    def errstate(self) -> np.errstate:
        """Return the `numpy.errstate` context matching this policy."""
        return np.errstate(**{name: getattr(self, name).value for name in _CATEGORIES})

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name).value for name in _CATEGORIES}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "FloatPolicy":
        unknown = set(d) - set(_CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown float_policy keys: {sorted(unknown)}.")
        return cls(**{name: d.get(name, FloatAction.IGNORE.value) for name in _CATEGORIES})


DEFAULT_POLICY: FloatPolicy = FloatPolicy()

_ACTIVE_POLICY: ContextVar[FloatPolicy] = ContextVar("baryon_math_float_policy", default=DEFAULT_POLICY)


def current_policy() -> FloatPolicy:
    """Return the float policy active in the current thread or task."""
    return _ACTIVE_POLICY.get()


@contextmanager
def float_policy(policy: Optional[FloatPolicy] = None, **overrides: Any) -> Iterator[FloatPolicy]:
    """
    Activate a float policy for the duration of a `with` block.

    Parameters
    ----------
    policy : FloatPolicy, optional
        Policy to activate. Defaults to the currently active one.
    **overrides
        Per-category actions replacing those of `policy`
        (e.g. ``float_policy(divide="warn")``).

    Yields
    ------
    FloatPolicy
        The activated policy.

    Notes
    -----
    The policy lives in a `ContextVar`, so it only affects the current thread or
    asyncio task and is restored on exit.
    """
    active = current_policy() if policy is None else policy
    if overrides:
        unknown = set(overrides) - set(_CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown float_policy keys: {sorted(unknown)}.")
        active = replace(active, **overrides)

    token = _ACTIVE_POLICY.set(active)
    logger.debug("float policy set to %s", active.to_dict())
    try:
        yield active
    finally:
        _ACTIVE_POLICY.reset(token)
        logger.debug("float policy restored to %s", current_policy().to_dict())
