from datetime import timedelta

import jwt
import pytest

from task_tracker.auth.tokens import CurrentUser, TokenManager
from task_tracker.core.exceptions import AuthenticationError


class TestTokenManager:

    def test_create_token(self, token_manager):
        token = token_manager.create_token("user-42", email="test@example.com")

        payload = jwt.decode(token, token_manager.jwt_secret, algorithms=[token_manager.jwt_algorithm])

        assert payload["sub"] == "user-42"
        assert payload["email"] == "test@example.com"
        assert payload["exp"] > payload["iat"]

    def test_resolve_user(self, token_manager):
        token = token_manager.create_token("user-42")

        user = token_manager.resolve_user(token)

        assert user == CurrentUser(id="user-42", email=None)

    def test_resolve_user_from_id_claim(self, token_manager):
        token = jwt.encode({"id": "legacy-user"}, token_manager.jwt_secret, algorithm="HS256")

        assert token_manager.resolve_user(token).id == "legacy-user"

    def test_token_without_subject_is_rejected(self, token_manager):
        token = jwt.encode({"email": "nobody@example.com"}, token_manager.jwt_secret, algorithm="HS256")

        with pytest.raises(AuthenticationError):
            token_manager.resolve_user(token)

    def test_expired_token(self, token_manager):
        token = token_manager.create_token("user-42", expires_in=timedelta(minutes=-5))

        with pytest.raises(AuthenticationError) as exc_info:
            token_manager.verify_token(token)

        assert exc_info.value.message == "Token has expired"
        assert exc_info.value.status_code == 401

    def test_token_signed_with_other_secret(self, token_manager):
        foreign = TokenManager(secret="another-secret-key-that-is-long-enough-1234")
        token = foreign.create_token("user-42")

        with pytest.raises(AuthenticationError) as exc_info:
            token_manager.verify_token(token)

        assert exc_info.value.message == "Invalid token"

    def test_garbage_token(self, token_manager):
        with pytest.raises(AuthenticationError):
            token_manager.verify_token("not-a-jwt")
