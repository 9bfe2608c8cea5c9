"""
Tests: User endpoints
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import select

from bilemo.models import User, ROLE_USER
from bilemo.schemas.user import UserCreate
from bilemo.services.user_service import UserService
from tests.helpers import count_rows, create_enterprise, create_user


PROJECTION = {"id", "email", "firstname", "lastname", "date_of_birth", "available"}


@pytest_asyncio.fixture
async def enterprise(client):
    return await create_enterprise(client, "Acme")


class TestCreateUser:
    async def test_returns_projection(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        assert set(user) == PROJECTION
        assert user["firstname"] == "Ada"
        assert user["lastname"] == "Lovelace"
        assert user["email"] == "ada@bilemo.com"
        assert user["available"] is True
        assert user["date_of_birth"] is not None

    async def test_password_is_hashed_and_never_returned(self, client, enterprise, session_factory, hasher):
        user = await create_user(client, enterprise["uuid"], password="hunter2")

        assert "password" not in user

        async with session_factory() as session:
            stored = (await session.execute(select(User).where(User.id == user["id"]))).scalar_one()

        assert stored.password != "hunter2"
        assert hasher.verify("hunter2", stored.password)
        assert stored.roles == [ROLE_USER]
        assert stored.enterprise_id == enterprise["id"]

    async def test_password_optional(self, client, enterprise, session_factory):
        payload = {"uuid": enterprise["uuid"], "firstname": "Grace", "email": "grace@bilemo.com"}

        response = await client.post("/api/users", json=payload)

        assert response.status_code == 201
        async with session_factory() as session:
            stored = (await session.execute(select(User))).scalar_one()
        assert stored.password.startswith("$2")
        assert stored.lastname is None

    async def test_supplied_date_of_birth_is_kept(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"], date_of_birth="1815-12-10T00:00:00")
        assert user["date_of_birth"].startswith("1815-12-10")

    @pytest.mark.parametrize("missing", ["uuid", "firstname", "email"])
    async def test_missing_required_field_is_400(self, client, enterprise, session_factory, missing):
        payload = {
            "uuid": enterprise["uuid"],
            "firstname": "Ada",
            "email": "ada@bilemo.com",
        }
        del payload[missing]

        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == f"body.{missing}"
        assert await count_rows(session_factory, User) == 0

    async def test_invalid_email_is_400(self, client, enterprise):
        response = await client.post(
            "/api/users",
            json={"uuid": enterprise["uuid"], "firstname": "Ada", "email": "nope"},
        )
        assert response.status_code == 400

    async def test_unknown_enterprise_is_404(self, client, session_factory):
        response = await client.post(
            "/api/users",
            json={"uuid": str(uuid4()), "firstname": "Ada", "email": "ada@bilemo.com"},
        )

        assert response.status_code == 404
        assert await count_rows(session_factory, User) == 0

    async def test_duplicate_email_in_enterprise_is_409(self, client, enterprise):
        await create_user(client, enterprise["uuid"], email="ada@bilemo.com")

        response = await client.post(
            "/api/users",
            json={"uuid": enterprise["uuid"], "firstname": "Other", "email": "ADA@bilemo.com"},
        )

        assert response.status_code == 409

    async def test_same_email_in_other_enterprise_is_allowed(self, client, enterprise):
        other = await create_enterprise(client, "Other")
        await create_user(client, enterprise["uuid"], email="ada@bilemo.com")
        await create_user(client, other["uuid"], email="ada@bilemo.com")


class TestReadUsers:
    async def test_list_empty_enterprise(self, client, enterprise):
        response = await client.get(f"/api/users/{enterprise['uuid']}")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_only_own_users(self, client, enterprise):
        other = await create_enterprise(client, "Other")
        first = await create_user(client, enterprise["uuid"], email="a@bilemo.com")
        second = await create_user(client, enterprise["uuid"], email="b@bilemo.com")
        await create_user(client, other["uuid"], email="c@bilemo.com")

        response = await client.get(f"/api/users/{enterprise['uuid']}")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [first["id"], second["id"]]

    async def test_list_unknown_enterprise_is_404(self, client):
        response = await client.get(f"/api/users/{uuid4()}")
        assert response.status_code == 404

    async def test_get_user(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        response = await client.get(f"/api/user/{enterprise['uuid']}/{user['id']}")

        assert response.status_code == 200
        assert response.json() == user

    async def test_get_user_unknown_enterprise_is_404(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        response = await client.get(f"/api/user/{uuid4()}/{user['id']}")

        assert response.status_code == 404
        assert "Enterprise" in response.json()["error"]

    async def test_get_user_of_other_enterprise_is_404(self, client, enterprise):
        other = await create_enterprise(client, "Other")
        user = await create_user(client, other["uuid"])

        response = await client.get(f"/api/user/{enterprise['uuid']}/{user['id']}")

        assert response.status_code == 404
        assert "User" in response.json()["error"]

    async def test_get_missing_user_is_404(self, client, enterprise):
        response = await client.get(f"/api/user/{enterprise['uuid']}/999")
        assert response.status_code == 404


class TestUpdateUser:
    async def test_only_present_fields_change(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        response = await client.put(
            f"/api/user/{enterprise['uuid']}/{user['id']}",
            json={"lastname": "Byron"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["lastname"] == "Byron"
        assert body["firstname"] == user["firstname"]
        assert body["email"] == user["email"]
        assert body["available"] == user["available"]

    async def test_null_fields_are_ignored(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        response = await client.put(
            f"/api/user/{enterprise['uuid']}/{user['id']}",
            json={"firstname": None, "available": False},
        )

        assert response.status_code == 200
        assert response.json()["firstname"] == "Ada"
        assert response.json()["available"] is False

    async def test_update_is_idempotent(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])
        url = f"/api/user/{enterprise['uuid']}/{user['id']}"
        payload = {"firstname": "Augusta", "email": "augusta@bilemo.com"}

        first = await client.put(url, json=payload)
        second = await client.put(url, json=payload)

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()
        assert (await client.get(url)).json() == second.json()

    async def test_email_taken_by_other_user_is_409(self, client, enterprise):
        await create_user(client, enterprise["uuid"], email="taken@bilemo.com")
        user = await create_user(client, enterprise["uuid"], email="free@bilemo.com")

        response = await client.put(
            f"/api/user/{enterprise['uuid']}/{user['id']}",
            json={"email": "taken@bilemo.com"},
        )

        assert response.status_code == 409

    async def test_unknown_user_is_404(self, client, enterprise):
        response = await client.put(
            f"/api/user/{enterprise['uuid']}/42",
            json={"firstname": "X"},
        )
        assert response.status_code == 404

    async def test_unknown_enterprise_is_404(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        response = await client.put(f"/api/user/{uuid4()}/{user['id']}", json={"firstname": "X"})

        assert response.status_code == 404


class TestDeleteUser:
    async def test_delete_twice(self, client, enterprise, session_factory):
        user = await create_user(client, enterprise["uuid"])
        url = f"/api/user/{enterprise['uuid']}/{user['id']}"

        first = await client.delete(url)
        second = await client.delete(url)

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404
        assert await count_rows(session_factory, User) == 0

    async def test_cannot_delete_through_other_enterprise(self, client, enterprise, session_factory):
        other = await create_enterprise(client, "Other")
        user = await create_user(client, enterprise["uuid"])

        response = await client.delete(f"/api/user/{other['uuid']}/{user['id']}")

        assert response.status_code == 404
        assert await count_rows(session_factory, User) == 1


class TestUserLimits:
    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    async def test_oversized_user_id_is_400(self, client, enterprise, method):
        url = f"/api/user/{enterprise['uuid']}/{2**64}"
        kwargs = {"json": {"firstname": "X"}} if method == "put" else {}

        response = await client.request(method.upper(), url, **kwargs)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "path.user_id"

    async def test_zero_user_id_is_400(self, client, enterprise):
        response = await client.get(f"/api/user/{enterprise['uuid']}/0")
        assert response.status_code == 400

    async def test_blank_firstname_on_update_is_400(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])
        url = f"/api/user/{enterprise['uuid']}/{user['id']}"

        response = await client.put(url, json={"firstname": "   "})

        assert response.status_code == 400
        assert (await client.get(url)).json()["firstname"] == "Ada"

    async def test_firstname_is_stripped_on_update(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])

        response = await client.put(
            f"/api/user/{enterprise['uuid']}/{user['id']}",
            json={"firstname": "  Augusta "},
        )

        assert response.json()["firstname"] == "Augusta"

    async def test_email_longer_than_column_is_400(self, client, enterprise, session_factory):
        email = "a" * 64 + "@" + "b" * 60 + "." + "c" * 60 + ".com"
        assert len(email) > 180

        response = await client.post(
            "/api/users",
            json={"uuid": enterprise["uuid"], "firstname": "Ada", "email": email},
        )

        assert response.status_code == 400
        assert await count_rows(session_factory, User) == 0

    async def test_email_longer_than_column_on_update_is_400(self, client, enterprise):
        user = await create_user(client, enterprise["uuid"])
        email = "a" * 64 + "@" + "b" * 60 + "." + "c" * 60 + ".com"

        response = await client.put(
            f"/api/user/{enterprise['uuid']}/{user['id']}",
            json={"email": email},
        )

        assert response.status_code == 400

    async def test_password_over_72_bytes_is_400(self, client, enterprise, session_factory):
        # 40 characters, 80 bytes
        password = "é" * 40

        response = await client.post(
            "/api/users",
            json={
                "uuid": enterprise["uuid"],
                "firstname": "Ada",
                "email": "ada@bilemo.com",
                "password": password,
            },
        )

        assert response.status_code == 400
        assert await count_rows(session_factory, User) == 0

    async def test_password_of_72_bytes_is_accepted(self, client, enterprise):
        await create_user(client, enterprise["uuid"], password="é" * 36)


class TestUserServiceHasher:
    async def test_reads_need_no_hasher(self, client, enterprise, session_factory):
        await create_user(client, enterprise["uuid"])

        async with session_factory() as session:
            users = await UserService(session).list(enterprise["uuid"])

        assert [u.email for u in users] == ["ada@bilemo.com"]

    async def test_create_falls_back_to_shared_hasher(self, enterprise, session_factory, hasher):
        async with session_factory() as session:
            user = await UserService(session).create(UserCreate(
                uuid=enterprise["uuid"],
                firstname="Grace",
                email="grace@bilemo.com",
                password="s3cret-pass",
            ))

        assert hasher.verify("s3cret-pass", user.password)
