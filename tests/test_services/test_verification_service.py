"""
Unit tests for VerificationService
"""
from datetime import datetime, timezone

import pytest

from papalote.core.errors import NotFoundError, ValidationError
from papalote.services.verification_service import VerificationService


class TestVerificationService:

    def test_get_by_email(self):
        request = VerificationService().get_by_email("jorge@example.com")

        assert request.id == "ver_001"
        assert request.questionnaire.years_of_experience == 15

    def test_get_requires_email(self):
        with pytest.raises(ValidationError, match="Email required"):
            VerificationService().get_by_email("")

    def test_submit_starts_as_submitted(self):
        # Act
        request = VerificationService().submit({
            "sellerEmail": "ana@ejemplo.com",
            "sellerName": "Ana Artesana",
            "requestedLevel": "verified_artisan",
        })

        # Assert
        assert request.id.startswith("ver_")
        assert request.status == "submitted"
        assert request.questionnaire.craft_type == []
        assert VerificationService().get_by_email("ana@ejemplo.com").id == request.id

    def test_submissions_in_the_same_millisecond_are_kept_apart(self, monkeypatch):
        # Arrange
        frozen = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        monkeypatch.setattr("papalote.services.verification_service.utc_now", lambda: frozen)
        service = VerificationService()

        # Act
        first = service.submit({"sellerEmail": "ana@ejemplo.com", "sellerName": "Ana"})
        second = service.submit({"sellerEmail": "luis@ejemplo.com", "sellerName": "Luis"})

        # Assert
        assert first.id != second.id
        assert service.get_by_email("ana@ejemplo.com").id == first.id
        assert service.get_by_email("luis@ejemplo.com").id == second.id

    def test_resubmitting_replaces_previous_request(self):
        # Arrange
        service = VerificationService()
        service.submit({"sellerEmail": "ana@ejemplo.com", "sellerName": "Ana"})

        # Act
        latest = service.submit({"sellerEmail": "ANA@ejemplo.com", "sellerName": "Ana Artesana"})

        # Assert
        stored = service.get_by_email("ana@ejemplo.com")
        assert stored.id == latest.id
        assert stored.seller_name == "Ana Artesana"

    def test_submit_requires_email(self):
        with pytest.raises(ValidationError, match="sellerEmail is required"):
            VerificationService().submit({"sellerName": "Ana"})

    def test_update_status(self):
        updated = VerificationService().update({"id": "ver_001", "status": "approved"})

        assert updated.status == "approved"
        assert updated.seller_email == "jorge@example.com"

    def test_update_unknown_request(self):
        with pytest.raises(NotFoundError, match="Verification request not found"):
            VerificationService().update({"id": "ver_999", "status": "approved"})

    def test_update_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            VerificationService().update({"id": "ver_001", "status": "maybe"})
