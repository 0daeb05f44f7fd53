"""
Fontes de dados compartilhadas pelos layouts.

Cada fonte recebe o ``Contexto`` do registro em montagem e devolve o valor
do campo. Os dígitos verificadores são recalculados a cada montagem.
"""

from dataclasses import dataclass
from datetime import date

from ..base import limpar_numero, modulo11
from .utils import centavos, formatar_data_cnab400, numerico


@dataclass(frozen=True)
class Contexto:
    perfil: object
    beneficiario: object
    data_geracao: date
    pagamento: object = None
    sequencial: int = None


def digito_agencia(ctx: Contexto) -> str:
    perfil = ctx.perfil
    return modulo11(ctx.beneficiario.agencia, perfil.mapeamento_agencia, perfil.identificador)


def digito_conta(ctx: Contexto) -> str:
    perfil = ctx.perfil
    return modulo11(ctx.beneficiario.conta_corrente, perfil.mapeamento_conta, perfil.identificador)


def nosso_numero_com_dv(ctx: Contexto) -> str:
    """Base do nosso número com zeros à esquerda seguida do próprio DV."""
    perfil = ctx.perfil
    formato = perfil.nosso_numero
    bruto = str(ctx.pagamento.nosso_numero).strip()
    if not formato.dv_anexado:
        bruto = bruto[: -formato.tamanho_dv]
    base = numerico(bruto, formato.tamanho_base, "nosso_numero")
    dv = modulo11(base, perfil.mapeamento_nosso_numero, perfil.identificador)
    return base + dv


def documento_sacado(ctx: Contexto) -> str:
    return limpar_numero(ctx.pagamento.documento_sacado)


def data_geracao(ctx: Contexto) -> str:
    return formatar_data_cnab400(ctx.data_geracao)


def data_pagamento(nome: str):
    """Data do pagamento em DDMMAA (000000 quando ausente)."""

    def _fonte(ctx: Contexto) -> str:
        return formatar_data_cnab400(getattr(ctx.pagamento, nome))

    return _fonte


def em_centavos(nome: str):
    def _fonte(ctx: Contexto) -> int:
        return centavos(getattr(ctx.pagamento, nome), nome)

    return _fonte


def complemento_header(tamanho: int):
    """Texto fixo do perfil alinhado à direita no bloco de complemento."""

    def _fonte(ctx: Contexto) -> str:
        return ctx.perfil.complemento_header.rjust(tamanho, " ")

    return _fonte
