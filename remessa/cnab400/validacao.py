"""Regras declarativas de validação (presença, tamanho, inclusão)."""

from dataclasses import dataclass
from typing import Optional

from ..base import apenas_digitos, limpar_numero, validar_cnpj, validar_cpf


@dataclass(frozen=True)
class Violacao:
    campo: str
    mensagem: str

    def __str__(self) -> str:
        return f"{self.campo} {self.mensagem}"


def _vazio(valor) -> bool:
    return valor is None or (isinstance(valor, str) and valor.strip() == "")


@dataclass(frozen=True)
class Presenca:
    campo: str
    mensagem: str = "não pode estar em branco."

    def verificar(self, valor) -> bool:
        return not _vazio(valor)


@dataclass(frozen=True)
class Tamanho:
    """Tamanho exato ou faixa [minimo, maximo] inclusiva.

    Valores vazios ficam para a regra de presença.
    """

    campo: str
    mensagem: str
    exato: Optional[int] = None
    minimo: Optional[int] = None
    maximo: Optional[int] = None

    def verificar(self, valor) -> bool:
        if _vazio(valor):
            return True
        tamanho = len(str(valor))
        if self.exato is not None and tamanho != self.exato:
            return False
        if self.minimo is not None and tamanho < self.minimo:
            return False
        if self.maximo is not None and tamanho > self.maximo:
            return False
        return True


@dataclass(frozen=True)
class Inclusao:
    campo: str
    permitidos: frozenset
    mensagem: str = "não existente para este banco."

    def verificar(self, valor) -> bool:
        return valor in self.permitidos


@dataclass(frozen=True)
class ApenasDigitos:
    campo: str
    mensagem: str = "deve conter apenas dígitos."

    def verificar(self, valor) -> bool:
        return _vazio(valor) or apenas_digitos(str(valor))


@dataclass(frozen=True)
class Documento:
    """CPF (11 dígitos) ou CNPJ (14 dígitos) com dígitos verificadores válidos."""

    campo: str
    mensagem: str = "deve ser um CPF ou CNPJ válido."

    def verificar(self, valor) -> bool:
        if _vazio(valor):
            return True
        numero = limpar_numero(str(valor))
        if len(numero) <= 11:
            return validar_cpf(numero)
        return validar_cnpj(numero)


def validar(objeto, regras):
    """
    Aplica todas as regras ao objeto e devolve a lista completa de violações.
    """
    violacoes = []
    for regra in regras:
        valor = getattr(objeto, regra.campo, None)
        if not regra.verificar(valor):
            violacoes.append(Violacao(regra.campo, regra.mensagem))
    return violacoes
