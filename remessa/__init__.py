"""Gerador de arquivos de remessa CNAB 400."""
from .base import (
    ESTADOS_BR,
    apenas_digitos,
    limpar_numero,
    validar_cpf,
    validar_cnpj,
    modulo11
)

from .exceptions import (
    RemessaError,
    ConfigurationValidationError,
    LayoutConfigurationError,
    PaymentValidationError,
    FieldError,
    FieldOverflowError,
    FieldTooLongError,
    FieldValueError,
    LiteralWidthError,
    ChecksumConfigurationError,
    UnsupportedBankError
)

from .cnab400 import *  # noqa: F401,F403
from .cnab400 import __all__ as _CNAB400_ALL

__all__ = [
    "ESTADOS_BR",
    "apenas_digitos",
    "limpar_numero",
    "validar_cpf",
    "validar_cnpj",
    "modulo11",
    "RemessaError",
    "ConfigurationValidationError",
    "LayoutConfigurationError",
    "PaymentValidationError",
    "FieldError",
    "FieldOverflowError",
    "FieldTooLongError",
    "FieldValueError",
    "LiteralWidthError",
    "ChecksumConfigurationError",
    "UnsupportedBankError",
] + list(_CNAB400_ALL)
