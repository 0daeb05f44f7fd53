"""
Modelos de entrada da remessa: beneficiário e pagamento.

O beneficiário é normalizado uma única vez na criação (larguras do perfil)
e fica imutável. O pagamento tem regras próprias, avaliadas antes de o
detalhe ser montado.
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from ..base import ESTADOS_BR, limpar_numero
from ..exceptions import ConfigurationValidationError
from .validacao import (
    ApenasDigitos,
    Documento,
    Inclusao,
    Presenca,
    Tamanho,
    validar,
)


@dataclass(frozen=True)
class Beneficiario:
    agencia: str = ""
    conta_corrente: str = ""
    digito_conta: str = ""
    documento_cedente: str = ""
    carteira: str = ""
    codigo_beneficiario: str = ""
    sequencial_remessa: str = ""
    empresa_mae: str = ""


def criar_beneficiario(perfil, **campos) -> Beneficiario:
    """
    Cria o beneficiário com os campos de largura fixa já completados com
    zeros à esquerda (larguras do perfil). Valores maiores que a largura são
    mantidos para que a validação os aponte; vazios continuam vazios.
    """
    conhecidos = {f.name for f in fields(Beneficiario)}
    desconhecidos = sorted(set(campos) - conhecidos)
    if desconhecidos:
        raise ValueError(f"Campos de beneficiário desconhecidos: {', '.join(desconhecidos)}")

    normalizados = {}
    for nome, valor in campos.items():
        texto = "" if valor is None else str(valor).strip()
        largura = perfil.larguras.get(nome)
        if largura and texto:
            texto = texto.rjust(largura, "0")
        normalizados[nome] = texto
    return Beneficiario(**normalizados)


def validar_beneficiario(perfil, beneficiario: Beneficiario):
    """Lista completa de violações do beneficiário para o perfil."""
    return validar(beneficiario, perfil.regras_beneficiario)


def exigir_beneficiario_valido(perfil, beneficiario: Beneficiario) -> None:
    violacoes = validar_beneficiario(perfil, beneficiario)
    if violacoes:
        raise ConfigurationValidationError(violacoes, perfil.identificador)


REGRAS_PAGAMENTO = (
    Presenca("nosso_numero"),
    Presenca("data_vencimento"),
    Presenca("valor"),
    Presenca("documento_sacado"),
    Presenca("nome_sacado"),
    Presenca("endereco_sacado"),
    Presenca("cep_sacado"),
    Presenca("cidade_sacado"),
    Presenca("uf_sacado"),
    Tamanho("cep_sacado", "deve ter 8 dígitos.", exato=8),
    ApenasDigitos("cep_sacado"),
    Inclusao("uf_sacado", frozenset(ESTADOS_BR), "não é uma UF válida."),
    Tamanho("numero_documento", "deve ter no máximo 10 dígitos.", maximo=10),
    Tamanho("codigo_multa", "deve ter 1 dígito.", exato=1),
    Tamanho("tipo_mora", "deve ter 1 dígito.", exato=1),
    Tamanho("cod_desconto", "deve ter 1 dígito.", exato=1),
    Tamanho("identificacao_ocorrencia", "deve ter 2 dígitos.", exato=2),
    Tamanho("codigo_protesto", "deve ter 1 dígito.", exato=1),
    Tamanho("dias_protesto", "deve ter no máximo 2 dígitos.", maximo=2),
    ApenasDigitos("nosso_numero"),
    ApenasDigitos("numero_documento"),
    ApenasDigitos("codigo_multa"),
    ApenasDigitos("tipo_mora"),
    ApenasDigitos("cod_desconto"),
    ApenasDigitos("identificacao_ocorrencia"),
    ApenasDigitos("codigo_protesto"),
    ApenasDigitos("dias_protesto"),
    Documento("documento_sacado"),
)


@dataclass(frozen=True)
class Pagamento:
    nosso_numero: str = ""
    data_vencimento: date = None
    valor: Decimal = Decimal("0")
    documento_sacado: str = ""
    nome_sacado: str = ""
    endereco_sacado: str = ""
    bairro_sacado: str = ""
    cep_sacado: str = ""
    cidade_sacado: str = ""
    uf_sacado: str = ""
    nome_avalista: str = ""
    numero_documento: str = ""
    data_emissao: date = field(default_factory=date.today)
    codigo_multa: str = "0"
    percentual_multa: Decimal = Decimal("0")
    tipo_mora: str = "3"
    valor_mora: Decimal = Decimal("0")
    cod_desconto: str = "0"
    data_desconto: date = None
    valor_desconto: Decimal = Decimal("0")
    valor_abatimento: Decimal = Decimal("0")
    identificacao_ocorrencia: str = "01"
    codigo_protesto: str = "3"
    dias_protesto: str = "00"

    def erros(self):
        return validar(self, REGRAS_PAGAMENTO)

    @property
    def invalido(self) -> bool:
        return bool(self.erros())

    @property
    def identificacao_sacado(self) -> str:
        """'01' para CPF, '02' para CNPJ."""
        return "01" if len(limpar_numero(self.documento_sacado)) <= 11 else "02"

    @property
    def identificacao(self) -> str:
        partes = [f"nosso número {self.nosso_numero or '?'}"]
        if self.numero_documento:
            partes.append(f"documento {self.numero_documento}")
        if self.nome_sacado:
            partes.append(f"pagador {self.nome_sacado}")
        return ", ".join(partes)

    @classmethod
    def de_dict(cls, dados: dict) -> "Pagamento":
        """
        Cria o pagamento a partir de um dicionário (JSON). Datas em
        AAAA-MM-DD ou DD/MM/AAAA; valores como texto ou número.
        """
        conhecidos = {f.name: f for f in fields(cls)}
        desconhecidos = sorted(set(dados) - set(conhecidos))
        if desconhecidos:
            raise ValueError(f"Campos de pagamento desconhecidos: {', '.join(desconhecidos)}")

        valores = {}
        for nome, bruto in dados.items():
            if nome.startswith("data_"):
                data = _parse_data(nome, bruto)
                if data is None and nome == "data_emissao":
                    continue
                valores[nome] = data
            elif nome in _CAMPOS_DECIMAIS:
                valores[nome] = _parse_decimal(nome, bruto)
            else:
                valores[nome] = "" if bruto is None else str(bruto).strip()
        return cls(**valores)


_CAMPOS_DECIMAIS = {
    "valor",
    "percentual_multa",
    "valor_mora",
    "valor_desconto",
    "valor_abatimento",
}


def _parse_data(nome: str, valor):
    if valor is None or valor == "":
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    texto = str(valor).strip()
    for formato in ("%Y-%m-%d", "%d/%m/%Y"):
        try:
            return datetime.strptime(texto, formato).date()
        except ValueError:
            continue
    raise ValueError(f"Campo '{nome}': data '{texto}' inválida (use AAAA-MM-DD ou DD/MM/AAAA).")


def _parse_decimal(nome: str, valor) -> Decimal:
    if valor is None or valor == "":
        return Decimal("0")
    try:
        numero = Decimal(str(valor).strip().replace(",", "."))
    except InvalidOperation:
        raise ValueError(f"Campo '{nome}': valor '{valor}' não é numérico.") from None
    if not numero.is_finite():
        raise ValueError(f"Campo '{nome}': valor '{valor}' não é numérico.")
    return numero
