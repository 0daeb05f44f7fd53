"""
Montagem dos registros da remessa CNAB 400 (header e detalhes).

O montador recebe um perfil de banco e um beneficiário já validado e gera
as linhas de 400 posições a partir dos layouts declarados no perfil.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from ..exceptions import FieldError, PaymentValidationError
from .fontes import Contexto
from .layout import montar_linha
from .modelos import Pagamento, criar_beneficiario, exigir_beneficiario_valido
from .perfil import obter_perfil

logger = logging.getLogger(__name__)

POLITICA_ABORTAR = "abortar"
POLITICA_IGNORAR = "ignorar"
POLITICAS = (POLITICA_ABORTAR, POLITICA_IGNORAR)


@dataclass(frozen=True)
class ResultadoDetalhe:
    """Resultado da montagem de um detalhe: a linha ou as violações."""

    identificacao: str
    sequencial: int
    linha: str = None
    violacoes: tuple = ()

    @property
    def ok(self) -> bool:
        return self.linha is not None

    def desembrulhar(self) -> str:
        if not self.ok:
            raise PaymentValidationError(self.identificacao, self.violacoes, self.sequencial)
        return self.linha


@dataclass
class RemessaArquivo:
    codigo_banco: str
    nome_banco: str
    header: str
    detalhes: list = field(default_factory=list)
    falhas: list = field(default_factory=list)

    @property
    def linhas(self) -> list:
        return [self.header] + self.detalhes

    def conteudo(self) -> str:
        """Linhas separadas por CRLF, com CRLF final."""
        return "\r\n".join(self.linhas) + "\r\n"


class MontadorRemessa:
    """Monta header e detalhes de uma remessa para um perfil de banco."""

    def __init__(self, perfil, beneficiario):
        exigir_beneficiario_valido(perfil, beneficiario)
        self.perfil = perfil
        self.beneficiario = beneficiario

    @property
    def codigo_banco(self) -> str:
        return self.perfil.codigo

    @property
    def nome_banco(self) -> str:
        return self.perfil.nome_banco

    def _contexto(self, data_geracao=None, pagamento=None, sequencial=None) -> Contexto:
        return Contexto(
            perfil=self.perfil,
            beneficiario=self.beneficiario,
            data_geracao=data_geracao or date.today(),
            pagamento=pagamento,
            sequencial=sequencial,
        )

    def montar_header(self, data_geracao=None) -> str:
        return montar_linha(self.perfil.layout_header, self._contexto(data_geracao))

    def montar_detalhe(self, pagamento: Pagamento, sequencial: int) -> ResultadoDetalhe:
        """
        Monta o detalhe do pagamento na posição ``sequencial``.

        Pagamento inválido não gera linha: o resultado traz as violações.
        Falha de formatação (FieldError) é sempre propagada, já com o
        pagamento, a posição e o perfil.
        """
        violacoes = tuple(pagamento.erros())
        if violacoes:
            return ResultadoDetalhe(pagamento.identificacao, sequencial, violacoes=violacoes)
        try:
            linha = montar_linha(
                self.perfil.layout_detalhe,
                self._contexto(pagamento=pagamento, sequencial=sequencial),
            )
        except FieldError as exc:
            exc.contextualizar(pagamento.identificacao, sequencial, self.perfil.identificador)
            raise
        logger.debug("Detalhe %06d montado (%s)", sequencial, pagamento.identificacao)
        return ResultadoDetalhe(pagamento.identificacao, sequencial, linha=linha)

    def gerar(self, pagamentos, data_geracao=None, politica: str = POLITICA_ABORTAR) -> RemessaArquivo:
        """
        Gera o arquivo completo: header e um detalhe por pagamento, na ordem
        recebida, numerados a partir de 1.

        Políticas para pagamento inválido:
          - 'abortar': levanta PaymentValidationError; nenhum arquivo é gerado.
          - 'ignorar': pula o pagamento, renumera os seguintes e o registra
            em ``falhas``.
        """
        if politica not in POLITICAS:
            raise ValueError(f"Política desconhecida: {politica!r} (use {', '.join(POLITICAS)}).")

        arquivo = RemessaArquivo(
            codigo_banco=self.codigo_banco,
            nome_banco=self.nome_banco,
            header=self.montar_header(data_geracao),
        )
        for pagamento in pagamentos:
            resultado = self.montar_detalhe(pagamento, len(arquivo.detalhes) + 1)
            if resultado.ok:
                arquivo.detalhes.append(resultado.linha)
            elif politica == POLITICA_ABORTAR:
                resultado.desembrulhar()
            else:
                logger.warning(
                    "Pagamento ignorado (%s): %s",
                    resultado.identificacao,
                    "; ".join(str(v) for v in resultado.violacoes),
                )
                arquivo.falhas.append(resultado)

        logger.info(
            "Remessa %s gerada: %d detalhe(s), %d ignorado(s)",
            self.perfil.identificador,
            len(arquivo.detalhes),
            len(arquivo.falhas),
        )
        return arquivo


def gerar_remessa(banco, beneficiario: dict, pagamentos, data_geracao=None, politica: str = POLITICA_ABORTAR) -> RemessaArquivo:
    """
    Atalho: escolhe o perfil pelo banco ('unicred' ou '136'), cria o
    beneficiário a partir dos campos e gera o arquivo.
    """
    perfil = obter_perfil(banco)
    montador = MontadorRemessa(perfil, criar_beneficiario(perfil, **beneficiario))
    return montador.gerar(pagamentos, data_geracao=data_geracao, politica=politica)


def gerar_remessa_de_dict(dados: dict, banco=None, data_geracao=None, politica: str = POLITICA_ABORTAR) -> RemessaArquivo:
    """
    Gera a remessa a partir de um documento JSON:
    ``{"banco": ..., "beneficiario": {...}, "pagamentos": [{...}, ...]}``.

    Raises:
        ValueError: documento mal formado (campos ausentes ou desconhecidos,
            datas ou valores ilegíveis).
    """
    if not isinstance(dados, dict):
        raise ValueError("O documento de entrada deve ser um objeto JSON.")
    banco = banco or dados.get("banco")
    if not banco:
        raise ValueError("Banco não informado.")
    beneficiario = dados.get("beneficiario")
    if not isinstance(beneficiario, dict):
        raise ValueError("Campo 'beneficiario' ausente ou inválido.")
    brutos = dados.get("pagamentos")
    if not isinstance(brutos, list):
        raise ValueError("Campo 'pagamentos' ausente ou inválido.")
    pagamentos = [Pagamento.de_dict(item) for item in brutos]
    return gerar_remessa(banco, beneficiario, pagamentos, data_geracao, politica)
