"""
Tabela declarativa de campos de um registro CNAB 400.

Cada registro é uma lista ordenada de ``Campo(nome, tamanho, regra, fonte)``.
A soma dos tamanhos tem de ser 400; brancos e zeros de preenchimento são
campos explícitos, nunca sobras.
"""

from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, Optional

from ..exceptions import LayoutConfigurationError, LiteralWidthError
from .utils import alfanumerico, literal, numerico
from .validacao import Violacao

TAMANHO_REGISTRO = 400

NUMERICO = "9"
ALFANUMERICO = "X"
LITERAL = "L"


@dataclass(frozen=True)
class Campo:
    nome: str
    tamanho: int
    regra: str
    fonte: Optional[Callable] = None
    fixo: Optional[str] = None

    def valor(self, contexto):
        if self.fixo is not None:
            return self.fixo
        return self.fonte(contexto)

    def formatar(self, contexto) -> str:
        valor = self.valor(contexto)
        if self.regra == NUMERICO:
            return numerico(valor, self.tamanho, self.nome)
        if self.regra == ALFANUMERICO:
            return alfanumerico(valor, self.tamanho)
        return literal(valor, self.tamanho, self.nome)


def de(caminho: str) -> Callable:
    """Fonte que lê um atributo do contexto, ex.: ``de('pagamento.nome_sacado')``."""
    return attrgetter(caminho)


def fixo(nome: str, texto: str) -> Campo:
    return Campo(nome, len(texto), LITERAL, fixo=texto)


def brancos(nome: str, tamanho: int) -> Campo:
    return Campo(nome, tamanho, LITERAL, fixo=" " * tamanho)


def zeros(nome: str, tamanho: int) -> Campo:
    return Campo(nome, tamanho, LITERAL, fixo="0" * tamanho)


def num(nome: str, tamanho: int, fonte: Callable) -> Campo:
    return Campo(nome, tamanho, NUMERICO, fonte)


def alfa(nome: str, tamanho: int, fonte: Callable) -> Campo:
    return Campo(nome, tamanho, ALFANUMERICO, fonte)


def pronto(nome: str, tamanho: int, fonte: Callable) -> Campo:
    """Campo calculado que já sai com a largura exata (datas, DVs, nosso número)."""
    return Campo(nome, tamanho, LITERAL, fonte)


def verificar_layout(nome_registro: str, campos, perfil: str = "") -> None:
    """
    Confere o layout na carga do perfil: larguras positivas, nomes únicos,
    literais fixos com a largura declarada e soma exata de 400 posições.
    """
    violacoes = []
    nomes = set()
    total = 0
    for campo in campos:
        if campo.tamanho <= 0:
            violacoes.append(Violacao(campo.nome, "deve ter tamanho positivo."))
        if campo.nome in nomes:
            violacoes.append(Violacao(campo.nome, "aparece mais de uma vez no layout."))
        nomes.add(campo.nome)
        if campo.fixo is not None:
            try:
                literal(campo.fixo, campo.tamanho, campo.nome)
            except LiteralWidthError as exc:
                violacoes.append(Violacao(campo.nome, str(exc)))
        elif campo.fonte is None:
            violacoes.append(Violacao(campo.nome, "não tem fonte de dados."))
        total += campo.tamanho
    if total != TAMANHO_REGISTRO:
        violacoes.append(
            Violacao(
                nome_registro,
                f"soma {total} posições, esperado {TAMANHO_REGISTRO}.",
            )
        )
    if violacoes:
        raise LayoutConfigurationError(violacoes, perfil)


def posicoes(campos):
    """
    Mapa nome -> (início, fim), posições 1-based inclusivas como nos manuais.
    """
    mapa = {}
    inicio = 1
    for campo in campos:
        fim = inicio + campo.tamanho - 1
        mapa[campo.nome] = (inicio, fim)
        inicio = fim + 1
    return mapa


def montar_linha(campos, contexto) -> str:
    return "".join(campo.formatar(contexto) for campo in campos)
