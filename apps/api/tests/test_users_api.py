"""
Tests for app user registration (service and API)
"""
import pytest

from models import AppUser
from services.user_registry import UserAlreadyRegistered, get_user, register_user


class TestUserRegistry:

    def test_register(self, db_session):
        user = register_user(db_session, "kherld.testnet", "Eternity Pro")
        assert user.id == 0
        assert user.uid == "kherld.testnet"
        assert db_session.query(AppUser).count() == 1

    def test_ids_are_sequential(self, db_session):
        first = register_user(db_session, "a.testnet", None)
        second = register_user(db_session, "b.testnet", None)
        assert (first.id, second.id) == (0, 1)

    def test_duplicate_uid_refused(self, db_session):
        register_user(db_session, "kherld.testnet", "Eternity Pro")
        with pytest.raises(UserAlreadyRegistered):
            register_user(db_session, "kherld.testnet", "Someone Else")
        assert db_session.query(AppUser).count() == 1
        assert get_user(db_session, "kherld.testnet").u_name == "Eternity Pro"

    def test_concurrent_duplicate_refused(self, db_session, monkeypatch):
        """A registration that slips past the lookup still fails cleanly"""
        import services.user_registry as registry

        register_user(db_session, "kherld.testnet", "Eternity Pro")
        db_session.commit()

        # The other request's row is not visible to the lookup yet
        monkeypatch.setattr(registry, "get_user", lambda db, uid: None)
        with pytest.raises(UserAlreadyRegistered):
            register_user(db_session, "kherld.testnet", "Someone Else")

        assert db_session.query(AppUser).count() == 1
        assert db_session.query(AppUser).one().u_name == "Eternity Pro"

    def test_get_unknown(self, db_session):
        assert get_user(db_session, "nobody.testnet") is None


class TestUsersEndpoints:

    def test_create_user(self, client, caller_headers):
        response = client.post("/v1/users", json={"u_name": "Eternity Pro"}, headers=caller_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 0
        assert data["uid"] == "kherld.testnet"
        assert data["u_name"] == "Eternity Pro"
        assert data["created_at"]

    def test_duplicate_is_conflict(self, client, caller_headers):
        client.post("/v1/users", json={"u_name": "Eternity Pro"}, headers=caller_headers)
        response = client.post("/v1/users", json={"u_name": "Again"}, headers=caller_headers)

        assert response.status_code == 409
        assert response.json()["detail"] == "The provided uid is already in use by an existing user"

    def test_get_me(self, client, caller_headers):
        client.post("/v1/users", json={"u_name": "Eternity Pro"}, headers=caller_headers)
        response = client.get("/v1/users/me", headers=caller_headers)
        assert response.status_code == 200
        assert response.json()["u_name"] == "Eternity Pro"

    def test_get_me_unregistered(self, client, caller_headers):
        response = client.get("/v1/users/me", headers=caller_headers)
        assert response.status_code == 404

    def test_requires_caller(self, client):
        response = client.post("/v1/users", json={"u_name": "Nobody"})
        assert response.status_code == 401
