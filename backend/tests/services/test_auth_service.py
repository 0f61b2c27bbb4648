"""
Tests for core/services/auth_service.py
Covers: register, authenticate, generate_token, validate_token
"""
import threading
import pytest
from datetime import timedelta
from unittest.mock import MagicMock, patch

from core.domain.interfaces import DuplicateKeyError, UserStore
from core.result import ErrorKind
from core.security.passwords import PasswordHasher
from core.security.tokens import TokenCodec
from core.services.auth_service import AuthService
from core.store import InMemoryUserStore


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def service(store, hasher):
    return AuthService(store, hasher, TokenCodec(secret_key="test-secret"))


class TestRegister:

    def test_register_success(self, service, store, hasher):
        result = service.register("alice", "secret123")
        assert result.success
        assert result.value == "User saved successfully."

        stored = store.find_by_username("alice")
        assert stored.password != "secret123"
        assert hasher.verify("secret123", stored.password)

    def test_register_twice(self, service, store):
        service.register("alice", "secret123")
        result = service.register("alice", "other")
        assert result.failed
        assert result.error_kind == ErrorKind.ALREADY_EXISTS
        assert result.message == "User Already Exists, try with unique usernames."
        assert len(store) == 1

    @pytest.mark.parametrize("username,password", [("", "x"), ("  ", "x"), ("bob", "")])
    def test_register_blank_fields(self, service, store, username, password):
        result = service.register(username, password)
        assert result.error_kind == ErrorKind.INVALID_DATA
        assert len(store) == 0

    def test_register_password_too_long(self, service):
        result = service.register("alice", "x" * 73)
        assert result.error_kind == ErrorKind.INVALID_DATA

    def test_register_username_too_long(self, service, store):
        assert service.register("a" * 50, "secret123").success
        result = service.register("b" * 51, "secret123")
        assert result.error_kind == ErrorKind.INVALID_DATA
        assert result.message == "Username must not exceed 50 characters"
        assert len(store) == 1

    def test_store_uniqueness_violation_maps_to_already_exists(self, hasher):
        store = MagicMock(spec=UserStore)
        store.find_by_username.return_value = None
        store.save.side_effect = DuplicateKeyError("username 'alice' already exists")
        service = AuthService(store, hasher, TokenCodec(secret_key="k"))

        result = service.register("alice", "secret123")
        assert result.error_kind == ErrorKind.ALREADY_EXISTS

    def test_store_failure_is_unexpected(self, hasher):
        store = MagicMock(spec=UserStore)
        store.find_by_username.side_effect = RuntimeError("db down")
        service = AuthService(store, hasher, TokenCodec(secret_key="k"))

        result = service.register("alice", "secret123")
        assert result.error_kind == ErrorKind.UNEXPECTED
        store.save.assert_not_called()

    def test_concurrent_registrations_single_winner(self, service, store):
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(service.register("alice", "secret123"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sum(1 for r in results if r.success) == 1
        assert sum(1 for r in results if r.error_kind == ErrorKind.ALREADY_EXISTS) == 7
        assert len(store) == 1


class TestAuthenticate:

    def test_authenticate_success(self, service):
        service.register("alice", "secret123")
        assert service.authenticate("alice", "secret123").success

    def test_wrong_password(self, service):
        service.register("alice", "secret123")
        result = service.authenticate("alice", "wrong")
        assert result.error_kind == ErrorKind.INVALID_CREDENTIALS
        assert result.message == "Invalid username or password"

    def test_unknown_user(self, service):
        result = service.authenticate("nobody", "secret123")
        assert result.error_kind == ErrorKind.INVALID_CREDENTIALS

    def test_unknown_user_still_checks_a_digest(self, service, hasher):
        with patch.object(hasher, "verify", wraps=hasher.verify) as verify:
            result = service.authenticate("nobody", "secret123")

        assert result.message == "Invalid username or password"
        verify.assert_called_once_with("secret123", hasher.dummy_digest)

    def test_unknown_user_and_wrong_password_look_alike(self, service):
        service.register("alice", "secret123")
        unknown = service.authenticate("nobody", "secret123")
        wrong = service.authenticate("alice", "wrong")
        assert (unknown.error_kind, unknown.message) == (wrong.error_kind, wrong.message)


class TestTokens:

    def test_generate_and_validate(self, service):
        token = service.generate_token("alice")
        result = service.validate_token(token)
        assert result.success
        assert result.value == "alice"

    def test_generate_does_not_require_registered_user(self, service):
        assert service.validate_token(service.generate_token("ghost")).value == "ghost"

    def test_validate_expired(self, service):
        token = service.generate_token("alice", ttl=timedelta(seconds=-5))
        assert service.validate_token(token).error_kind == ErrorKind.TOKEN_INVALID

    def test_validate_garbage(self, service):
        assert service.validate_token("garbage").error_kind == ErrorKind.TOKEN_INVALID
