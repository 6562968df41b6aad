import pytest

from fake_backend import ADMIN, BASE_URL, CUSTOMER, REAL_TOKEN, refusing_transport
from optyshop_admin.main import create_memory_panel
from optyshop_admin.session import (
    AUTH_CACHE_KEY,
    DEMO_USER_KEY,
    LAST_AUTH_CHECK_KEY,
    REFRESH_TOKEN_KEY,
    SESSION_KEYS,
    TOKEN_KEY,
    AdminSession,
    AuthError,
    _verify_demo_token,
)

pytestmark = pytest.mark.anyio


def _state(backend):
    return backend.state.backend


async def _login_admin(panel):
    return await panel.session.login(ADMIN["email"], ADMIN["password"])


# --- login ---
async def test_admin_login_stores_tokens(panel):
    user = await _login_admin(panel)
    assert user.role == "admin"
    assert panel.store.get_item(TOKEN_KEY) == REAL_TOKEN
    assert panel.store.get_item(REFRESH_TOKEN_KEY) == "refresh-1"
    assert panel.session.state.is_demo is False


async def test_non_admin_login_is_refused(panel):
    with pytest.raises(AuthError, match="Admin privileges required"):
        await panel.session.login(CUSTOMER["email"], CUSTOMER["password"])
    assert panel.session.token is None


async def test_bad_credentials_raise_backend_message(panel):
    with pytest.raises(AuthError, match="Invalid credentials"):
        await panel.session.login(ADMIN["email"], "wrong")
    assert panel.session.is_demo is False


async def test_unreachable_backend_enters_demo_mode():
    panel = create_memory_panel(BASE_URL, transport=refusing_transport())
    user = await panel.session.login("someone@optyshop.test", "whatever")
    assert user.role == "admin"
    assert user.email == "someone@optyshop.test"
    assert panel.session.state.is_demo is True
    assert panel.store.get_json(DEMO_USER_KEY)["name"] == "Demo Admin"
    assert _verify_demo_token(panel.session.token)["demo"] is True


async def test_server_error_on_login_enters_demo_mode(panel, backend):
    _state(backend).mode = "server_error"
    await _login_admin(panel)
    assert panel.session.is_demo is True


async def test_real_login_leaves_demo_mode(panel, backend):
    _state(backend).mode = "server_error"
    await _login_admin(panel)
    _state(backend).mode = "ok"
    await _login_admin(panel)
    assert panel.session.is_demo is False
    assert panel.session.token == REAL_TOKEN


async def test_new_login_drops_previous_auth_cache(panel, backend):
    await _login_admin(panel)
    assert (await panel.session.check_auth()).name == "Real User"

    _state(backend).mode = "server_error"
    await _login_admin(panel)
    assert panel.store.get_item(AUTH_CACHE_KEY) is None
    assert panel.store.get_item(LAST_AUTH_CHECK_KEY) is None
    assert (await panel.session.check_auth()).name == "Demo Admin"


# --- check_auth ---
async def test_check_auth_without_token_is_anonymous(panel):
    assert await panel.session.check_auth() is None


async def test_check_auth_in_demo_mode_skips_backend(panel, backend):
    _state(backend).mode = "server_error"
    await _login_admin(panel)
    _state(backend).auth_me_status = 500
    user = await panel.session.check_auth()
    assert user.name == "Demo Admin"


async def test_invalid_demo_token_clears_session(panel):
    panel.store.set_item(TOKEN_KEY, "not-a-jwt")
    panel.store.set_json(DEMO_USER_KEY, {"id": 1, "name": "Demo Admin", "role": "admin"})
    assert await panel.session.check_auth() is None
    assert panel.session.token is None
    assert panel.session.is_demo is False


async def test_check_auth_fetches_and_caches_user(panel, backend):
    await _login_admin(panel)
    user = await panel.session.check_auth()
    assert user.email == ADMIN["email"]
    assert panel.store.get_json(AUTH_CACHE_KEY)["email"] == ADMIN["email"]

    # fresh cache answers without the backend
    _state(backend).auth_me_status = 500
    again = await panel.session.check_auth()
    assert again.email == ADMIN["email"]


async def test_rejected_token_clears_session(panel):
    panel.store.set_item(TOKEN_KEY, "stale")
    assert await panel.session.check_auth() is None
    for key in SESSION_KEYS:
        assert panel.store.get_item(key) is None


async def test_missing_auth_route_keeps_token(panel, backend):
    await _login_admin(panel)
    _state(backend).auth_me_status = 404
    assert await panel.session.check_auth() is None
    assert panel.session.token == REAL_TOKEN


async def test_rate_limited_check_uses_stale_cache(panel, backend):
    await _login_admin(panel)
    panel.store.set_json(AUTH_CACHE_KEY, {"id": 7, "name": "Cached", "role": "admin"})
    panel.store.set_item(LAST_AUTH_CHECK_KEY, "0")
    _state(backend).auth_me_status = 429
    user = await panel.session.check_auth()
    assert user.name == "Cached"


# --- logout / unauthorized ---
async def test_logout_clears_everything(panel):
    await _login_admin(panel)
    await panel.session.check_auth()
    await panel.session.logout()
    for key in SESSION_KEYS:
        assert panel.store.get_item(key) is None


async def test_demo_logout_does_not_need_backend():
    panel = create_memory_panel(BASE_URL, transport=refusing_transport())
    await panel.session.login("demo@optyshop.test", "x")
    await panel.session.logout()
    assert panel.session.token is None
    assert panel.session.is_demo is False


async def test_unauthorized_admin_call_keeps_session(store):
    session = AdminSession(store)
    store.set_item(TOKEN_KEY, "tok")
    session.handle_unauthorized("/admin/lens-colors")
    assert session.token == "tok"

    session.handle_unauthorized("/auth/me")
    assert session.token is None


async def test_unauthorized_in_demo_mode_keeps_session(store):
    session = AdminSession(store)
    store.set_item(TOKEN_KEY, "tok")
    store.set_json(DEMO_USER_KEY, {"id": 1, "role": "admin"})
    session.handle_unauthorized("/auth/me")
    assert session.token == "tok"
