# optyshop_admin/session.py
import logging
import os
import time
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from optyshop_admin.http_client import ApiClient, ApiError
from optyshop_admin.local_store import LocalStore
from optyshop_admin.schemas import AdminUser, SessionState

logger = logging.getLogger(__name__)

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
ALGORITHM = "HS256"
DEMO_TOKEN_EXPIRE_MINUTES = 12 * 60
AUTH_CACHE_SECONDS = int(os.getenv("AUTH_CACHE_SECONDS", "600"))

LOGIN_URL = "/auth/login"
ME_URL = "/auth/me"
LOGOUT_URL = "/auth/logout"

# storage keys
TOKEN_KEY = "admin_token"
REFRESH_TOKEN_KEY = "refresh_token"
DEMO_USER_KEY = "demo_user"
LAST_AUTH_CHECK_KEY = "last_auth_check"
AUTH_CACHE_KEY = "auth_check_cache"
SESSION_KEYS = (TOKEN_KEY, REFRESH_TOKEN_KEY, DEMO_USER_KEY, LAST_AUTH_CHECK_KEY, AUTH_CACHE_KEY)


class AuthError(Exception):
    pass


def _create_demo_token(user: AdminUser, minutes: int = DEMO_TOKEN_EXPIRE_MINUTES) -> str:
    now = datetime.now(tz=timezone.utc)
    payload = {
        "sub": user.email or "",
        "role": user.role,
        "demo": True,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=minutes)).timestamp()),
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def _verify_demo_token(token: str) -> dict:
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    if not payload.get("demo"):
        raise JWTError("not a demo token")
    return payload


def _unwrap(body) -> dict:
    # {success, message, data: {...}} or the bare object
    if isinstance(body, dict) and isinstance(body.get("data"), dict):
        return body["data"]
    return body if isinstance(body, dict) else {}


class AdminSession:
    def __init__(self, store: LocalStore, api: Optional[ApiClient] = None):
        self.store = store
        self.api = api

    # --- state ---
    @property
    def token(self) -> Optional[str]:
        return self.store.get_item(TOKEN_KEY)

    @property
    def is_demo(self) -> bool:
        return self.store.get_item(DEMO_USER_KEY) is not None

    @property
    def state(self) -> SessionState:
        return SessionState(is_demo=self.is_demo)

    def clear(self):
        for key in SESSION_KEYS:
            self.store.remove_item(key)

    def handle_unauthorized(self, url: str):
        """401 from the backend: drop the session unless it is a demo or admin CRUD call."""
        if self.is_demo or url.startswith("/admin/"):
            logger.warning("API call blocked in demo mode or admin operation - backend requires real authentication")
            return
        logger.warning("Authentication failed - clearing session")
        self.clear()

    # --- login / logout ---
    async def login(self, email: str, password: str) -> AdminUser:
        # a new login never answers check_auth with the previous user
        self.store.remove_item(AUTH_CACHE_KEY)
        self.store.remove_item(LAST_AUTH_CHECK_KEY)
        try:
            r = await self.api.post(LOGIN_URL, {"email": email, "password": password})
        except ApiError as e:
            if e.is_network_error or e.is_server_error or e.status == 404:
                return self._enter_demo_mode(email)
            raise AuthError(e.body_message or e.message) from e

        body = _unwrap(r.data)
        user_data = body.get("user")
        token = body.get("token") or body.get("access_token")
        if not user_data:
            raise AuthError("Invalid response format from server")
        user = AdminUser(**user_data)
        if user.role != "admin":
            raise AuthError("Access denied. Admin privileges required.")
        if not token:
            raise AuthError("No token received from server")

        self.store.set_item(TOKEN_KEY, token)
        if body.get("refreshToken"):
            self.store.set_item(REFRESH_TOKEN_KEY, body["refreshToken"])
        self.store.remove_item(DEMO_USER_KEY)
        return user

    def _enter_demo_mode(self, email: str) -> AdminUser:
        logger.info("Backend unavailable - setting demo mode")
        user = AdminUser(
            id=1,
            name="Demo Admin",
            email=email,
            role="admin",
            created_at=datetime.now(tz=timezone.utc).isoformat(),
        )
        self.store.set_item(TOKEN_KEY, _create_demo_token(user))
        self.store.set_json(DEMO_USER_KEY, user.model_dump())
        return user

    async def logout(self):
        try:
            if self.api is not None and not self.is_demo:
                await self.api.post(LOGOUT_URL)
        except ApiError as e:
            logger.error("Logout error: %r", e)
        finally:
            self.clear()

    # --- auth check ---
    def _cached_user(self, max_age: Optional[float]) -> Optional[AdminUser]:
        cached = self.store.get_json(AUTH_CACHE_KEY)
        if not isinstance(cached, dict):
            return None
        if max_age is not None:
            last = self.store.get_item(LAST_AUTH_CHECK_KEY)
            try:
                if last is None or time.time() - float(last) >= max_age:
                    return None
            except ValueError:
                return None
        return AdminUser(**cached)

    async def check_auth(self) -> Optional[AdminUser]:
        cached = self._cached_user(AUTH_CACHE_SECONDS)
        if cached is not None:
            return cached

        token = self.token
        demo_user = self.store.get_json(DEMO_USER_KEY)
        if token and isinstance(demo_user, dict):
            try:
                _verify_demo_token(token)
            except JWTError:
                logger.warning("invalid demo token - clearing session")
                self.clear()
                return None
            return AdminUser(**demo_user)

        if not token:
            return None

        try:
            r = await self.api.get(ME_URL)
        except ApiError as e:
            if e.status == 429:
                return self._cached_user(None)
            if e.status == 401:
                self.clear()
            elif e.status != 404 and "route not found" not in e.body_message.lower():
                logger.error("Auth check error: %r", e)
            return None

        body = _unwrap(r.data)
        user = AdminUser(**(body.get("user") or body))
        self.store.set_item(LAST_AUTH_CHECK_KEY, str(time.time()))
        self.store.set_json(AUTH_CACHE_KEY, user.model_dump())
        return user
