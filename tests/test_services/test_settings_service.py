"""
Unit tests for SettingsService
"""
import pytest

from papalote.core.errors import NotFoundError, ValidationError
from papalote.services.maintenance_service import is_maintenance_mode
from papalote.services.settings_service import SettingsService, SettingsValidationError


class TestSettingsService:

    def test_defaults(self):
        settings = SettingsService().get()

        assert settings.general.site_name == "Papalote Market"
        assert settings.payments.platform_commission == 8
        assert settings.updated_at is None

    def test_save_section_keeps_other_fields(self):
        # Act
        saved = SettingsService().save_section("payments", {"minOrderAmount": 250}, user_id="9")

        # Assert
        assert saved.payments.min_order_amount == 250
        assert saved.payments.platform_commission == 8
        assert saved.updated_by == "9"
        assert saved.updated_at is not None

    def test_unknown_section(self):
        with pytest.raises(NotFoundError):
            SettingsService().save_section("billing", {})

    def test_out_of_range_commission(self):
        with pytest.raises(SettingsValidationError) as exc_info:
            SettingsService().save_section("payments", {"platformCommission": 150})

        assert exc_info.value.errors == {
            "payments.platformCommission": "La comisión debe estar entre 0 y 100%"
        }

    def test_saving_maintenance_mode_turns_it_on(self):
        SettingsService().save_section("general", {"maintenanceMode": True})

        assert is_maintenance_mode() is True

    def test_reset_restores_defaults_and_disables_maintenance(self):
        # Arrange
        service = SettingsService()
        service.save_section("general", {"siteName": "Otro", "maintenanceMode": True})

        # Act
        settings = service.reset()

        # Assert
        assert settings.general.site_name == "Papalote Market"
        assert is_maintenance_mode() is False

    def test_validate_reports_every_error(self):
        errors = SettingsService.validate({
            "general": {"siteName": "  "},
            "email": {"smtpPort": 70000},
        })

        assert set(errors) == {"general.siteName", "email.smtpPort"}

    def test_test_email_config(self):
        service = SettingsService()

        assert service.test_email_config() == "Email de prueba enviado correctamente"
        with pytest.raises(ValidationError, match="SMTP incompleta"):
            service.test_email_config({"smtpHost": ""})
