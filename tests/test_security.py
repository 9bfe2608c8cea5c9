"""
Tests: Password hashing and configuration
"""

import string

from bilemo.config import Settings
from bilemo.core.security import PasswordHasher, generate_temporary_password, get_password_hasher


class TestPasswordHasher:
    def test_hash_is_salted_and_verifiable(self, hasher):
        first = hasher.hash("password")
        second = hasher.hash("password")

        assert first != "password"
        assert first != second
        assert hasher.verify("password", first)
        assert not hasher.verify("wrong", first)

    def test_rounds_come_from_settings(self):
        assert get_password_hasher().hash("x").split("$")[2] == "04"

    def test_explicit_rounds(self):
        hashed = PasswordHasher(rounds=5).hash("x")
        assert hashed.split("$")[2] == "05"


class TestTemporaryPassword:
    def test_contains_every_character_class(self):
        password = generate_temporary_password(16)

        assert len(password) == 16
        assert any(c in string.ascii_lowercase for c in password)
        assert any(c in string.ascii_uppercase for c in password)
        assert any(c in string.digits for c in password)
        assert any(c in "!@#$%^&*" for c in password)


class TestSettings:
    def test_database_url_override(self):
        settings = Settings(database_url="postgresql+asyncpg://u:p@db:5432/bilemo")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/bilemo"
        assert settings.sync_database_url == "postgresql://u:p@db:5432/bilemo"

    def test_database_url_from_parts(self):
        settings = Settings(
            database_url=None,
            postgres_host="db",
            postgres_port=5433,
            postgres_user="u",
            postgres_password="p",
            postgres_db="x",
        )

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/x"
        assert settings.sync_database_url == "postgresql://u:p@db:5433/x"

    def test_cors_origins_accept_comma_separated(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
