import pytest

from optyshop_admin.fallback import FallbackPolicy, should_fallback
from optyshop_admin.http_client import ApiError
from optyshop_admin.schemas import SessionState

LIVE = SessionState(is_demo=False)
DEMO = SessionState(is_demo=True)


@pytest.mark.parametrize("policy", list(FallbackPolicy))
def test_demo_session_always_falls_back(policy):
    assert should_fallback(ApiError("bad request", status=400), DEMO, policy)


@pytest.mark.parametrize("policy", list(FallbackPolicy))
def test_unauthorized_always_falls_back(policy):
    assert should_fallback(ApiError("unauthorized", status=401), LIVE, policy)


@pytest.mark.parametrize("status,strict,widened", [
    (None, False, True),
    (500, False, True),
    (503, False, True),
    (400, False, False),
    (403, False, False),
    (404, False, False),
    (429, False, False),
])
def test_policy_matrix(status, strict, widened):
    err = ApiError("failed", status=status)
    assert should_fallback(err, LIVE, FallbackPolicy.strict) is strict
    assert should_fallback(err, LIVE, FallbackPolicy.widened) is widened


def test_non_api_errors_only_fall_back_in_demo():
    assert not should_fallback(RuntimeError("boom"), LIVE, FallbackPolicy.widened)
    assert should_fallback(RuntimeError("boom"), DEMO, FallbackPolicy.strict)
