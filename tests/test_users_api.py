#!/usr/bin/env python3
"""
Pytest tests for the user registration endpoints
Every test runs once per storage variant.
"""

import asyncio

import pytest

from tests.helpers import ApiTestCase, make_database_storage, make_memory_storage


class UserRegistrationContract(ApiTestCase):
    """Test POST /api/users and GET /api/users/{id}"""

    def setup_method(self):
        """Set up test fixtures"""
        super().setup_method()
        self.valid_user = {
            "name": "Ada Lovelace",
            "school": "Analytical High",
            "phoneNumber": "+1 (555) 010-0100",
        }

    def test_register_returns_public_fields_only(self):
        """Test that registration echoes exactly id, name, school and phone"""
        response = self.client.post("/api/users", json=self.valid_user)

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"id", "name", "school", "phoneNumber"}
        assert data["name"] == "Ada Lovelace"
        assert data["phoneNumber"] == "+1 (555) 010-0100"

        stored = asyncio.run(self.storage.get_user(data["id"]))
        assert stored is not None
        assert stored.created_at.utcoffset() is not None

    def test_register_trims_values(self):
        """Test that surrounding whitespace is not stored"""
        response = self.client.post(
            "/api/users",
            json={"name": "  Ada ", "school": " Analytical High", "phoneNumber": " 555 "},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Ada"
        assert response.json()["phoneNumber"] == "555"

    @pytest.mark.parametrize(
        "field,message",
        [
            ("name", "Name is required"),
            ("school", "School is required"),
            ("phoneNumber", "Phone number is required"),
        ],
    )
    def test_register_rejects_blank_field(self, field, message):
        """Test that each required field reports its own error"""
        payload = {**self.valid_user, field: "   "}

        response = self.client.post("/api/users", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid user data"
        assert f"{field}: {message}" in body["details"]

    def test_register_rejects_missing_field(self):
        """Test that an absent field is a client error"""
        payload = {"name": "Ada", "school": "Analytical High"}

        response = self.client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert "phoneNumber" in response.json()["details"]

    def test_register_rejects_phone_with_letters(self):
        """Test that phone numbers may not contain letters"""
        payload = {**self.valid_user, "phoneNumber": "555-CALL-NOW"}

        response = self.client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert "Please enter a valid phone number" in response.json()["details"]

    def test_register_rejects_overlong_phone(self):
        """Test that a phone number longer than the stored column is a client error"""
        payload = {**self.valid_user, "phoneNumber": "1" * 51}

        response = self.client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert response.json()["details"].startswith("phoneNumber:")

    @pytest.mark.parametrize(
        "phone", ["5550100", "555 0100", "555-0100", "(555) 0100", "+44 20 7946 0958"]
    )
    def test_register_accepts_phone_punctuation(self, phone):
        """Test that digits, spaces, dashes, parentheses and plus are accepted"""
        payload = {**self.valid_user, "phoneNumber": phone}

        response = self.client.post("/api/users", json=payload)

        assert response.status_code == 200

    def test_get_user(self):
        """Test fetching a registered user"""
        created = self.client.post("/api/users", json=self.valid_user).json()

        response = self.client.get(f"/api/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_user(self):
        """Test that an unknown user is a 404"""
        response = self.client.get("/api/users/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestUserRegistrationMemory(UserRegistrationContract):
    def make_storage(self, seed: bool = True):
        return make_memory_storage(seed)

    def test_rejected_registration_stores_nothing(self):
        """Test that a failed validation leaves storage untouched"""
        self.client.post("/api/users", json={**self.valid_user, "name": ""})

        assert self.storage.users == {}


class TestUserRegistrationDatabase(UserRegistrationContract):
    def make_storage(self, seed: bool = True):
        return make_database_storage(seed)
