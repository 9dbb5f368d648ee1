"""
Unit tests for checkout validators
"""
import pytest

from papalote.core.errors import ValidationError
from papalote.services.validators import (
    validate_checkout_options,
    validate_payment_method,
    validate_shipping_address,
)


class TestShippingAddressValidation:

    def test_valid_address(self, shipping_address):
        address = validate_shipping_address(shipping_address)

        assert address.postal_code == "06600"
        assert address.street_number == "123"

    @pytest.mark.parametrize("field,value,message", [
        ("firstName", "J", "El nombre debe tener al menos 2 caracteres"),
        ("firstName", "Juan3", "El nombre solo puede contener letras"),
        ("email", "no-es-correo", "Ingresa un correo electrónico válido"),
        ("phone", "123456789012a", "Ingresa un número de teléfono válido"),
        ("state", "Texas", "Selecciona un estado válido"),
        ("postalCode", "0660", "El código postal debe tener 5 dígitos"),
        ("postalCode", "0660A", "El código postal debe contener solo números"),
    ])
    def test_invalid_field(self, shipping_address, field, value, message):
        # Arrange
        shipping_address[field] = value

        # Act / Assert
        with pytest.raises(ValidationError) as exc_info:
            validate_shipping_address(shipping_address)
        assert str(exc_info.value) == message


class TestCheckoutOptions:

    def test_unknown_payment_method(self):
        with pytest.raises(ValidationError, match="método de pago"):
            validate_payment_method("bitcoin")

    def test_gift_message_limit(self):
        with pytest.raises(ValidationError, match="500 caracteres"):
            validate_checkout_options(True, gift_message="x" * 501)

    def test_valid_options(self):
        validate_checkout_options(True, gift_message="Feliz cumpleaños", notes=None)
