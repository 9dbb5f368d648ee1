"""
Settings Service - platform configuration edited from the admin panel

Settings are kept in memory; until an admin saves them the defaults apply.
general.maintenanceMode mirrors the process-wide maintenance flag.
"""
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from papalote.core.dates import utc_now_iso
from papalote.core.errors import NotFoundError, ValidationError
from papalote.core.storage import DataStore, get_store
from papalote.domain.settings import PlatformSettings, SETTINGS_SECTIONS
from papalote.services.maintenance_service import is_maintenance_mode, set_maintenance_mode


logger = logging.getLogger(__name__)

DEFAULT_UPDATED_BY = "admin"


class SettingsValidationError(ValidationError):
    """Settings rejected; errors maps "section.field" to a message"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(next(iter(errors.values())))


def validate_settings(settings: PlatformSettings) -> Dict[str, str]:
    """
    Check business limits

    Returns:
        Dict of "section.field" -> Spanish message (empty when valid)
    """
    errors: Dict[str, str] = {}

    if not settings.general.site_name.strip():
        errors["general.siteName"] = "El nombre del sitio es requerido"

    if settings.payments.min_order_amount < 0:
        errors["payments.minOrderAmount"] = "El monto mínimo no puede ser negativo"
    if settings.payments.platform_commission < 0 or settings.payments.platform_commission > 100:
        errors["payments.platformCommission"] = "La comisión debe estar entre 0 y 100%"

    if settings.security.session_timeout < 1:
        errors["security.sessionTimeout"] = "El tiempo de sesión debe ser al menos 1 hora"
    if settings.security.max_login_attempts < 1:
        errors["security.maxLoginAttempts"] = "Los intentos máximos deben ser al menos 1"

    if settings.email.smtp_port < 1 or settings.email.smtp_port > 65535:
        errors["email.smtpPort"] = "Puerto SMTP inválido"

    return errors


def _parse(data: Dict[str, Any]) -> PlatformSettings:
    try:
        return PlatformSettings.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise SettingsValidationError({field: first["msg"]})


class SettingsService:
    """
    Service for platform settings

    Usage:
        service = SettingsService()
        settings = service.get()
        service.save_section("payments", {"platformCommission": 10}, user_id="9")
    """

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    def get(self) -> PlatformSettings:
        settings = (
            PlatformSettings.model_validate(self.store.platform_settings)
            if self.store.platform_settings
            else PlatformSettings()
        )
        settings.general.maintenance_mode = is_maintenance_mode()
        return settings

    def commission_rate(self) -> float:
        """Platform commission as a fraction (8% -> 0.08)"""
        return self.get().payments.platform_commission / 100

    def _store(self, settings: PlatformSettings, user_id: Optional[str]) -> PlatformSettings:
        errors = validate_settings(settings)
        if errors:
            raise SettingsValidationError(errors)

        settings = settings.model_copy(update={
            "updated_at": utc_now_iso(),
            "updated_by": user_id or DEFAULT_UPDATED_BY,
        })
        self.store.platform_settings = settings.to_dict()
        set_maintenance_mode(settings.general.maintenance_mode)
        logger.info(f"Platform settings saved by {settings.updated_by}")
        return settings

    def save(self, data: Dict[str, Any], user_id: Optional[str] = None) -> PlatformSettings:
        """
        Replace all settings

        Raises:
            SettingsValidationError: if any value is out of range
        """
        return self._store(_parse(data), user_id)

    def save_section(self, section: str, data: Dict[str, Any], user_id: Optional[str] = None) -> PlatformSettings:
        """
        Replace one section; fields not sent keep their current value

        Raises:
            NotFoundError: if the section does not exist
            SettingsValidationError: if any value is out of range
        """
        if section not in SETTINGS_SECTIONS:
            raise NotFoundError(f"Sección de configuración desconocida: {section}")

        current = self.get().to_dict()
        current[section] = {**current[section], **data}
        return self._store(_parse(current), user_id)

    def reset(self) -> PlatformSettings:
        """Back to defaults; also turns maintenance mode off"""
        self.store.platform_settings = None
        set_maintenance_mode(False)
        logger.info("Platform settings reset to defaults")
        return self.get()

    @staticmethod
    def validate(data: Dict[str, Any]) -> Dict[str, str]:
        try:
            return validate_settings(_parse(data))
        except SettingsValidationError as e:
            return e.errors

    def test_email_config(self, data: Optional[Dict[str, Any]] = None) -> str:
        """
        Check the SMTP section is complete

        Returns:
            Confirmation message

        Raises:
            ValidationError: if host or sender email is missing
        """
        email = self.get().email.to_dict()
        email.update(data or {})
        if not email.get("smtpHost") or not email.get("senderEmail"):
            raise ValidationError("Configuración SMTP incompleta")
        return "Email de prueba enviado correctamente"
