"""Funções de formatação de campos compartilhadas pelos perfis CNAB 400."""

import unicodedata
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ..base import apenas_digitos
from ..exceptions import FieldOverflowError, FieldValueError, LiteralWidthError

def numerico(valor, tamanho: int, campo: str = "") -> str:
    """
    Alinha à direita preenchendo com zeros (campos 9[n]).
    Nunca trunca: valor maior que o campo é erro.
    """
    texto = "" if valor is None else str(valor).strip()
    if texto and not apenas_digitos(texto):
        raise FieldValueError(campo, valor)
    if len(texto) > tamanho:
        raise FieldOverflowError(campo, valor, tamanho)
    return texto.rjust(tamanho, "0")

def alfanumerico(valor, tamanho: int) -> str:
    """
    Alinha à esquerda preenchendo com brancos (campos X[n]).
    Textos livres maiores que o campo são truncados.
    """
    texto = _para_ascii("" if valor is None else str(valor))
    return texto[:tamanho].ljust(tamanho, " ")

def literal(texto: str, tamanho: int, campo: str = "") -> str:
    """
    Confere que o literal já tem exatamente o tamanho do campo.
    """
    texto = "" if texto is None else str(texto)
    if len(texto) != tamanho:
        raise LiteralWidthError(campo, texto, tamanho)
    return texto

def formatar_data_cnab400(data) -> str:
    """
    Data no formato DDMMAA; sem data, '000000'.
    """
    if not data:
        return "000000"
    return data.strftime("%d%m%y")

def centavos(valor, campo: str = "") -> int:
    """
    Converte um valor monetário (ou percentual com 2 casas) em inteiro de centavos.
    Valores não finitos ou grandes demais para o contexto decimal levantam
    FieldValueError.
    """
    if valor is None or valor == "":
        return 0
    try:
        numero = Decimal(str(valor))
        if not numero.is_finite():
            raise InvalidOperation
        return int((numero * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise FieldValueError(campo, valor, "não é um valor monetário representável") from None

def _para_ascii(texto: str) -> str:
    normalizado = unicodedata.normalize("NFKD", texto)
    return normalizado.encode("ascii", "ignore").decode("ascii")
