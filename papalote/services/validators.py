"""
Checkout validators - Mexican shipping address rules

Every check raises ValidationError with the first failing field's
Spanish message, the same text the checkout form shows.
"""
import re
from typing import Any, Dict, Optional

from pydantic import validate_email
from pydantic_core import PydanticCustomError

from papalote.core.errors import ValidationError
from papalote.domain.order import PAYMENT_METHODS, ShippingAddress


MEXICAN_STATES = (
    "Aguascalientes",
    "Baja California",
    "Baja California Sur",
    "Campeche",
    "Chiapas",
    "Chihuahua",
    "Ciudad de México",
    "Coahuila",
    "Colima",
    "Durango",
    "Estado de México",
    "Guanajuato",
    "Guerrero",
    "Hidalgo",
    "Jalisco",
    "Michoacán",
    "Morelos",
    "Nayarit",
    "Nuevo León",
    "Oaxaca",
    "Puebla",
    "Querétaro",
    "Quintana Roo",
    "San Luis Potosí",
    "Sinaloa",
    "Sonora",
    "Tabasco",
    "Tamaulipas",
    "Tlaxcala",
    "Veracruz",
    "Yucatán",
    "Zacatecas",
)

NAME_PATTERN = re.compile(r"^[a-zA-ZáéíóúüñÁÉÍÓÚÜÑ\s]+$")
PHONE_PATTERN = re.compile(r"^(\+52)?[\s.-]?(\d{2,3})[\s.-]?(\d{3,4})[\s.-]?(\d{4})$")
POSTAL_CODE_PATTERN = re.compile(r"^\d{5}$")

MAX_GIFT_MESSAGE_LENGTH = 500
MAX_NOTES_LENGTH = 500


def _length(value: str, minimum: Optional[int], maximum: Optional[int], too_short: str, too_long: str) -> None:
    if minimum is not None and len(value) < minimum:
        raise ValidationError(too_short)
    if maximum is not None and len(value) > maximum:
        raise ValidationError(too_long)


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def validate_shipping_address(data: Dict[str, Any]) -> ShippingAddress:
    """
    Validate a camelCase shipping address payload

    Returns:
        ShippingAddress built from the payload

    Raises:
        ValidationError: on the first invalid field
    """
    first_name = _text(data, "firstName")
    _length(first_name, 2, 50,
            "El nombre debe tener al menos 2 caracteres",
            "El nombre no puede exceder 50 caracteres")
    if not NAME_PATTERN.match(first_name):
        raise ValidationError("El nombre solo puede contener letras")

    last_name = _text(data, "lastName")
    _length(last_name, 2, 100,
            "Los apellidos deben tener al menos 2 caracteres",
            "Los apellidos no pueden exceder 100 caracteres")
    if not NAME_PATTERN.match(last_name):
        raise ValidationError("Los apellidos solo pueden contener letras")

    email = _text(data, "email")
    try:
        validate_email(email)
    except PydanticCustomError:
        raise ValidationError("Ingresa un correo electrónico válido")
    _length(email, None, 100, "", "El correo no puede exceder 100 caracteres")

    phone = _text(data, "phone")
    _length(phone, 10, 15,
            "El teléfono debe tener al menos 10 dígitos",
            "El teléfono no puede exceder 15 caracteres")
    if not PHONE_PATTERN.match(phone):
        raise ValidationError("Ingresa un número de teléfono válido")

    _length(_text(data, "street"), 3, 200,
            "La calle debe tener al menos 3 caracteres",
            "La calle no puede exceder 200 caracteres")
    _length(_text(data, "streetNumber"), 1, 20,
            "El número es requerido",
            "El número no puede exceder 20 caracteres")
    _length(_text(data, "apartment"), None, 50, "",
            "El número interior no puede exceder 50 caracteres")
    _length(_text(data, "neighborhood"), 2, 100,
            "La colonia debe tener al menos 2 caracteres",
            "La colonia no puede exceder 100 caracteres")
    _length(_text(data, "city"), 2, 100,
            "La ciudad debe tener al menos 2 caracteres",
            "La ciudad no puede exceder 100 caracteres")

    if data.get("state") not in MEXICAN_STATES:
        raise ValidationError("Selecciona un estado válido")

    postal_code = _text(data, "postalCode")
    if len(postal_code) != 5:
        raise ValidationError("El código postal debe tener 5 dígitos")
    if not POSTAL_CODE_PATTERN.match(postal_code):
        raise ValidationError("El código postal debe contener solo números")

    _length(_text(data, "references"), None, 500, "",
            "Las referencias no pueden exceder 500 caracteres")

    return ShippingAddress.model_validate(data)


def validate_payment_method(method: Optional[str]) -> str:
    if method not in PAYMENT_METHODS:
        raise ValidationError("Selecciona un método de pago válido")
    return method


def validate_checkout_options(
    accept_terms: bool,
    gift_message: Optional[str] = None,
    notes: Optional[str] = None,
) -> None:
    """Terms must be accepted; gift message and notes are limited to 500 characters"""
    if accept_terms is not True:
        raise ValidationError("Debes aceptar los términos y condiciones")
    if gift_message and len(gift_message) > MAX_GIFT_MESSAGE_LENGTH:
        raise ValidationError("El mensaje no puede exceder 500 caracteres")
    if notes and len(notes) > MAX_NOTES_LENGTH:
        raise ValidationError("Las notas no pueden exceder 500 caracteres")
