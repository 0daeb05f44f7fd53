"""CNAB 400 remessa engine: formatting, layouts, bank profiles and builders."""
from .constants import (
    CNAB400_UNICRED_CARTEIRAS_VALIDAS,
    CNAB400_UNICRED_CODIGO_BANCO,
    CNAB400_UNICRED_LARGURAS,
)

from .utils import (
    numerico,
    alfanumerico,
    literal,
    formatar_data_cnab400,
    centavos
)

from .validacao import (
    Violacao,
    Presenca,
    Tamanho,
    Inclusao,
    ApenasDigitos,
    Documento,
    validar
)

from .layout import (
    TAMANHO_REGISTRO,
    Campo,
    verificar_layout,
    posicoes,
    montar_linha
)

from .modelos import (
    Beneficiario,
    Pagamento,
    REGRAS_PAGAMENTO,
    criar_beneficiario,
    validar_beneficiario
)

from .perfil import (
    FormatoNossoNumero,
    PerfilBanco,
    RegistroPerfis,
    criar_registro_padrao,
    obter_perfil
)

from .unicred import (
    PERFIL_UNICRED
)

from .registro import (
    POLITICA_ABORTAR,
    POLITICA_IGNORAR,
    POLITICAS,
    MontadorRemessa,
    RemessaArquivo,
    ResultadoDetalhe,
    gerar_remessa,
    gerar_remessa_de_dict
)

__all__ = [
    "CNAB400_UNICRED_CARTEIRAS_VALIDAS",
    "CNAB400_UNICRED_CODIGO_BANCO",
    "CNAB400_UNICRED_LARGURAS",
    "numerico",
    "alfanumerico",
    "literal",
    "formatar_data_cnab400",
    "centavos",
    "Violacao",
    "Presenca",
    "Tamanho",
    "Inclusao",
    "ApenasDigitos",
    "Documento",
    "validar",
    "TAMANHO_REGISTRO",
    "Campo",
    "verificar_layout",
    "posicoes",
    "montar_linha",
    "Beneficiario",
    "Pagamento",
    "REGRAS_PAGAMENTO",
    "criar_beneficiario",
    "validar_beneficiario",
    "FormatoNossoNumero",
    "PerfilBanco",
    "RegistroPerfis",
    "criar_registro_padrao",
    "obter_perfil",
    "PERFIL_UNICRED",
    "POLITICA_ABORTAR",
    "POLITICA_IGNORAR",
    "POLITICAS",
    "MontadorRemessa",
    "RemessaArquivo",
    "ResultadoDetalhe",
    "gerar_remessa",
    "gerar_remessa_de_dict"
]
