"""Login/registration for the stand-in backend. Tokens are opaque and in-memory."""
from __future__ import annotations
import secrets
from pentopublic.domain.exceptions import AuthError, ConflictError
from pentopublic.infra.memory_store import PlatformStore, UserRecord
from pentopublic.api.schemas.auth import AuthSession, LoginRequest, RegisterRequest, RegisterResponse


class AuthService:
    def __init__(self, store: PlatformStore) -> None:
        self._store = store

    def login(self, payload: LoginRequest) -> AuthSession:
        user = self._store.user_by_name(payload.user_name)
        if user is None or not secrets.compare_digest(user.password, payload.password):
            raise AuthError("Invalid credentials")
        if not user.is_active:
            raise AuthError("Account is disabled")
        token = secrets.token_urlsafe(24)
        with self._store.lock:
            self._store.tokens[token] = user.id
        return AuthSession(token=token, role=user.role, user_name=user.user_name)

    def register(self, payload: RegisterRequest) -> RegisterResponse:
        with self._store.lock:
            if self._store.user_by_name(payload.user_name) is not None:
                raise ConflictError(f"User name '{payload.user_name}' is taken")
            user = UserRecord(
                id=self._store.next_user_id(),
                user_name=payload.user_name,
                password=payload.password,
                role=payload.role.value,
                email=payload.email,
            )
            self._store.users[user.id] = user
        return RegisterResponse(user_name=user.user_name, role=payload.role)

    def resolve(self, token: str) -> UserRecord:
        user_id = self._store.tokens.get(token)
        user = self._store.users.get(user_id) if user_id is not None else None
        if user is None:
            raise AuthError("Invalid or expired token")
        return user
