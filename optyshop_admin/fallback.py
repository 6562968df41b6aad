# optyshop_admin/fallback.py
import enum

from optyshop_admin.http_client import ApiError
from optyshop_admin.schemas import SessionState


class FallbackPolicy(str, enum.Enum):
    # demo session or 401 only
    strict = "strict"
    # additionally: no response at all, or 5xx
    widened = "widened"


def should_fallback(error: Exception, session_state: SessionState, policy: FallbackPolicy = FallbackPolicy.strict) -> bool:
    """Decide whether a failed network call is answered by the local simulator."""
    if session_state.is_demo:
        return True
    if not isinstance(error, ApiError):
        return False
    if error.status == 401:
        return True
    if policy == FallbackPolicy.widened:
        if error.is_network_error or error.is_server_error:
            return True
    return False
