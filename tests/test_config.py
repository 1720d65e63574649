import threading
import warnings

import numpy as np
import pytest

from baryon_math import Vec2, Vec3
from baryon_math.config import (
    DEFAULT_POLICY,
    FloatAction,
    FloatPolicy,
    current_policy,
    float_policy,
)


def test_default_policy_ignores_everything():
    assert current_policy() is DEFAULT_POLICY
    assert DEFAULT_POLICY.to_dict() == {
        "divide": "ignore", "over": "ignore", "under": "ignore", "invalid": "ignore",
    }


def test_default_policy_is_silent_on_ieee_edge_cases():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v = Vec2(1.0, 0.0) / 0.0
        w = Vec2(3e38, 1.0) * 10.0
    assert v.x == np.inf
    assert np.isnan(v.y)
    assert w.x == np.inf


def test_policy_accepts_strings_and_enums():
    p = FloatPolicy(divide="warn", invalid=FloatAction.WARN)
    assert p.divide is FloatAction.WARN
    assert p.invalid is FloatAction.WARN
    assert p.over is FloatAction.IGNORE


def test_policy_rejects_failing_modes():
    with pytest.raises(ValueError):
        FloatPolicy(divide="raise")
    with pytest.raises(ValueError):
        FloatPolicy(over="call")
    with pytest.raises(ValueError):
        FloatPolicy(invalid="loud")


def test_policy_dict_round_trip():
    p = FloatPolicy(divide="warn", under="warn")
    assert FloatPolicy.from_dict(p.to_dict()) == p
    assert FloatPolicy.from_dict({"over": "warn"}) == FloatPolicy(over="warn")
    with pytest.raises(ValueError):
        FloatPolicy.from_dict({"overflow": "warn"})


def test_float_policy_warns_and_still_returns_ieee_result():
    with float_policy(divide="warn") as active:
        assert current_policy() is active
        with pytest.warns(RuntimeWarning):
            v = Vec3(1.0, 2.0, -3.0) / 0.0
    assert v == Vec3(np.inf, np.inf, -np.inf)
    assert current_policy() is DEFAULT_POLICY


def test_float_policy_nests_and_restores():
    outer = FloatPolicy(invalid="warn")
    with float_policy(outer):
        with float_policy(divide="warn") as inner:
            assert inner.invalid is FloatAction.WARN
            assert inner.divide is FloatAction.WARN
        assert current_policy() is outer
    assert current_policy() is DEFAULT_POLICY


def test_float_policy_rejects_unknown_keys():
    with pytest.raises(ValueError):
        with float_policy(overflow="warn"):
            pass
    assert current_policy() is DEFAULT_POLICY


def test_float_policy_is_local_to_the_thread():
    seen = {}

    def worker():
        seen["policy"] = current_policy()

    with float_policy(divide="warn"):
        t = threading.Thread(target=worker)
        t.start()
        t.join()

    assert seen["policy"] is DEFAULT_POLICY
