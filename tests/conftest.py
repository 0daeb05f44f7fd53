import datetime
from decimal import Decimal

import pytest

from remessa.cnab400 import PERFIL_UNICRED, Pagamento, criar_beneficiario

DATA_GERACAO = datetime.date(2026, 10, 18)

CAMPOS_BENEFICIARIO = {
    "agencia": "1234",
    "conta_corrente": "12345",
    "digito_conta": "5",
    "documento_cedente": "11222333000181",
    "carteira": "21",
    "codigo_beneficiario": "42",
    "sequencial_remessa": "1",
    "empresa_mae": "EMPRESA TESTE LTDA",
}

CAMPOS_PAGAMENTO = {
    "nosso_numero": "123",
    "numero_documento": "987",
    "data_vencimento": datetime.date(2026, 11, 30),
    "data_emissao": datetime.date(2026, 10, 18),
    "valor": Decimal("150.75"),
    "documento_sacado": "111.444.777-35",
    "nome_sacado": "José da Silva",
    "endereco_sacado": "Rua XV de Novembro, 100",
    "bairro_sacado": "Centro",
    "cep_sacado": "89010100",
    "cidade_sacado": "Blumenau",
    "uf_sacado": "SC",
    "percentual_multa": Decimal("2.00"),
}


def novo_pagamento(**alteracoes):
    campos = dict(CAMPOS_PAGAMENTO)
    campos.update(alteracoes)
    return Pagamento(**campos)


@pytest.fixture
def perfil():
    return PERFIL_UNICRED


@pytest.fixture
def beneficiario(perfil):
    return criar_beneficiario(perfil, **CAMPOS_BENEFICIARIO)


@pytest.fixture
def pagamento():
    return novo_pagamento()


@pytest.fixture
def documento_json():
    return {
        "banco": "unicred",
        "beneficiario": dict(CAMPOS_BENEFICIARIO),
        "pagamentos": [
            {
                "nosso_numero": "123",
                "numero_documento": "987",
                "data_vencimento": "2026-11-30",
                "data_emissao": "18/10/2026",
                "valor": "150.75",
                "documento_sacado": "11144477735",
                "nome_sacado": "Jose da Silva",
                "endereco_sacado": "Rua XV de Novembro, 100",
                "bairro_sacado": "Centro",
                "cep_sacado": "89010100",
                "cidade_sacado": "Blumenau",
                "uf_sacado": "SC",
            },
            {
                "nosso_numero": "124",
                "data_vencimento": "2026-12-15",
                "data_emissao": "2026-10-18",
                "valor": 99.9,
                "documento_sacado": "11222333000181",
                "nome_sacado": "Comercio Exemplo SA",
                "endereco_sacado": "Av. Brasil, 2000",
                "cep_sacado": "89012000",
                "cidade_sacado": "Blumenau",
                "uf_sacado": "SC",
            },
        ],
    }
