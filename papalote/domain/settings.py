"""
Platform settings (admin configuration panel)
"""
from typing import Optional

from pydantic import Field

from papalote.domain.base import CamelModel


SETTINGS_SECTIONS = ("general", "payments", "notifications", "security", "email", "appearance")


class GeneralSettings(CamelModel):
    site_name: str = "Papalote Market"
    site_description: str = "Marketplace de artesanías mexicanas auténticas"
    maintenance_mode: bool = False
    allow_registrations: bool = True
    require_email_verification: bool = True


class PaymentSettings(CamelModel):
    stripe_enabled: bool = True
    paypal_enabled: bool = True
    mercado_pago_enabled: bool = True
    min_order_amount: float = 100
    platform_commission: float = 8  # percentage


class NotificationSettings(CamelModel):
    email_notifications: bool = True
    new_order_notifications: bool = True
    new_seller_notifications: bool = True
    low_stock_alerts: bool = True
    weekly_reports: bool = True


class SecuritySettings(CamelModel):
    two_factor_required: bool = False
    session_timeout: int = 24  # hours
    max_login_attempts: int = 5
    require_strong_passwords: bool = True


class EmailSettings(CamelModel):
    smtp_host: str = "smtp.papalote.com"
    smtp_port: int = 587
    sender_email: str = "no-reply@papalote.com"
    sender_name: str = "Papalote Market"


class AppearanceSettings(CamelModel):
    primary_color: str = "#dc2626"
    dark_mode_enabled: bool = False
    show_announcements: bool = True


class PlatformSettings(CamelModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    payments: PaymentSettings = Field(default_factory=PaymentSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    email: EmailSettings = Field(default_factory=EmailSettings)
    appearance: AppearanceSettings = Field(default_factory=AppearanceSettings)
    updated_at: Optional[str] = None
    updated_by: Optional[str] = None
