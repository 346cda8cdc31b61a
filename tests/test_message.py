"""
Tests for message endpoints.
"""
import pytest


@pytest.fixture
def sent_message(db_session, client_factory, test_user_data, other_user_data):
    """A message from testuser to otheruser."""
    client = client_factory(db_session, token=test_user_data["token"])
    response = client.post(
        "/api/messages/",
        json={"to_username": other_user_data["username"], "body": "Hi there"},
    )
    assert response.status_code == 201
    return response.json()["message"]


class TestMessageCreate:
    def test_create_message(self, sent_message):
        assert sent_message["from_username"] == "testuser"
        assert sent_message["to_username"] == "otheruser"
        assert sent_message["body"] == "Hi there"
        assert sent_message["sent_at"]

    def test_create_message_unknown_recipient(self, db_session, client_factory, test_user_data):
        client = client_factory(db_session, token=test_user_data["token"])
        response = client.post(
            "/api/messages/", json={"to_username": "nobody", "body": "hello?"}
        )

        assert response.status_code == 404

    def test_create_message_empty_body(
        self, db_session, client_factory, test_user_data, other_user_data
    ):
        client = client_factory(db_session, token=test_user_data["token"])
        response = client.post(
            "/api/messages/", json={"to_username": "otheruser", "body": ""}
        )

        assert response.status_code == 422

    def test_create_message_requires_login(self, db_session, client_factory, other_user_data):
        client = client_factory(db_session)
        response = client.post(
            "/api/messages/", json={"to_username": "otheruser", "body": "hi"}
        )

        assert response.status_code == 401


class TestMessageRead:
    def test_sender_can_read(self, db_session, client_factory, test_user_data, sent_message):
        client = client_factory(db_session, token=test_user_data["token"])
        response = client.get(f"/api/messages/{sent_message['id']}")

        assert response.status_code == 200
        message = response.json()["message"]
        assert message["from_user"]["username"] == "testuser"
        assert message["to_user"]["username"] == "otheruser"

    def test_recipient_can_read(self, db_session, client_factory, other_user_data, sent_message):
        client = client_factory(db_session, token=other_user_data["token"])
        response = client.get(f"/api/messages/{sent_message['id']}")

        assert response.status_code == 200

    def test_third_party_cannot_read(
        self, db_session, client_factory, user_factory, sent_message
    ):
        client = client_factory(db_session, token=user_factory("snoop"))
        response = client.get(f"/api/messages/{sent_message['id']}")

        assert response.status_code == 403

    def test_missing_message(self, db_session, client_factory, test_user_data):
        client = client_factory(db_session, token=test_user_data["token"])
        response = client.get("/api/messages/9999")

        assert response.status_code == 404


class TestMessageMarkRead:
    def test_recipient_marks_read(
        self, db_session, client_factory, other_user_data, sent_message
    ):
        client = client_factory(db_session, token=other_user_data["token"])
        response = client.post(f"/api/messages/{sent_message['id']}/read")

        assert response.status_code == 200
        message = response.json()["message"]
        assert message["id"] == sent_message["id"]
        assert message["read_at"] is not None

    def test_sender_cannot_mark_read(
        self, db_session, client_factory, test_user_data, sent_message
    ):
        client = client_factory(db_session, token=test_user_data["token"])
        response = client.post(f"/api/messages/{sent_message['id']}/read")

        assert response.status_code == 403
