"""
Unit tests for the maintenance switch
"""
from papalote.services.maintenance_service import (
    is_maintenance_mode,
    is_path_allowed,
    set_maintenance_mode,
)


class TestMaintenanceMode:

    def test_starts_off(self):
        assert is_maintenance_mode() is False

    def test_toggle(self):
        assert set_maintenance_mode(True) is True
        assert is_maintenance_mode() is True
        assert set_maintenance_mode(False) is False


class TestAllowedPaths:

    def test_prefix_and_sub_paths_are_allowed(self):
        assert is_path_allowed("/health") is True
        assert is_path_allowed("/api/admin/settings") is True
        assert is_path_allowed("/api/auth/login") is True

    def test_lookalike_paths_are_not_allowed(self):
        assert is_path_allowed("/healthcheck") is False
        assert is_path_allowed("/api/administrator") is False
        assert is_path_allowed("/api/authors") is False

    def test_storefront_is_not_allowed(self):
        assert is_path_allowed("/api/products") is False
