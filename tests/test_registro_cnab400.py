import dataclasses
import datetime
import logging
from decimal import Decimal

import pytest

from remessa.cnab400 import (
    PERFIL_UNICRED,
    POLITICA_IGNORAR,
    FormatoNossoNumero,
    MontadorRemessa,
    criar_beneficiario,
    gerar_remessa,
    gerar_remessa_de_dict,
)
from remessa.cnab400.utils import formatar_data_cnab400
from remessa.exceptions import (
    ConfigurationValidationError,
    FieldOverflowError,
    FieldValueError,
    PaymentValidationError,
    UnsupportedBankError,
)

from conftest import CAMPOS_BENEFICIARIO, DATA_GERACAO, novo_pagamento


@pytest.fixture
def montador(perfil, beneficiario):
    return MontadorRemessa(perfil, beneficiario)


def test_header(montador):
    header = montador.montar_header(DATA_GERACAO)
    assert len(header) == 400
    assert header[0:26] == "01REMESSA01COBRANCA       "
    assert header[26:46] == "00000000000000000042"
    assert header[46:76] == "EMPRESA TESTE LTDA".ljust(30)
    assert header[76:79] == "136"
    assert header[79:94] == "UNICRED        "
    assert header[94:100] == "181026"
    assert header[100:107] == " " * 7
    assert header[107:110] == "000"
    assert header[110:117] == "0000001"
    assert header[117:394] == "codigo_beneficiario".rjust(277)
    assert header[394:400] == "000001"


def test_header_data_padrao_hoje(montador):
    assert montador.montar_header()[94:100] == formatar_data_cnab400(datetime.date.today())


@pytest.mark.parametrize(
    "inicio, fim, esperado",
    [
        (1, 1, "1"),
        (2, 6, "01234"),
        (7, 7, "3"),
        (8, 19, "000000012345"),
        (20, 20, "5"),
        (21, 21, "0"),
        (22, 24, "021"),
        (63, 65, "136"),
        (94, 94, "0"),
        (95, 104, "0000000200"),
        (105, 105, "3"),
        (106, 106, "N"),
        (109, 110, "01"),
        (111, 120, "0000000987"),
        (121, 126, "301126"),
        (127, 139, "0000000015075"),
        (150, 150, "0"),
        (151, 156, "181026"),
        (158, 158, "3"),
        (159, 160, "00"),
        (174, 179, "000000"),
        (193, 203, "00000001236"),
        (219, 220, "01"),
        (221, 234, "00011144477735"),
        (235, 274, "Jose da Silva".ljust(40)),
        (327, 334, "89010100"),
        (335, 354, "Blumenau".ljust(20)),
        (355, 356, "SC"),
        (357, 394, " " * 38),
        (395, 400, "000001"),
    ],
)
def test_detalhe(montador, pagamento, inicio, fim, esperado):
    linha = montador.montar_detalhe(pagamento, 1).desembrulhar()
    assert len(linha) == 400
    assert linha[inicio - 1:fim] == esperado


def test_detalhe_sequencial(montador, pagamento):
    linha = montador.montar_detalhe(pagamento, 7).desembrulhar()
    assert linha[394:400] == "000007"


def test_detalhe_cnpj(montador):
    pagamento = novo_pagamento(documento_sacado="11.222.333/0001-81")
    linha = montador.montar_detalhe(pagamento, 1).desembrulhar()
    assert linha[218:220] == "02"
    assert linha[220:234] == "11222333000181"


def test_detalhe_pagamento_invalido(montador):
    resultado = montador.montar_detalhe(novo_pagamento(uf_sacado="ZZ"), 3)
    assert not resultado.ok
    assert resultado.linha is None
    assert [v.campo for v in resultado.violacoes] == ["uf_sacado"]
    with pytest.raises(PaymentValidationError) as exc:
        resultado.desembrulhar()
    assert exc.value.sequencial == 3


def test_detalhe_valor_maior_que_o_campo(montador):
    with pytest.raises(FieldOverflowError) as exc:
        montador.montar_detalhe(novo_pagamento(valor=Decimal("100000000000.00")), 4)
    assert exc.value.campo == "valor"
    assert exc.value.identificacao.startswith("nosso número 123")
    assert exc.value.sequencial == 4
    assert exc.value.perfil == "unicred"
    assert "[unicred] Pagamento (nosso número 123" in str(exc.value)
    assert "na posição 4" in str(exc.value)


def test_detalhe_nosso_numero_maior_que_o_campo(montador):
    with pytest.raises(FieldOverflowError):
        montador.montar_detalhe(novo_pagamento(nosso_numero="12345678901"), 1)


def test_nosso_numero_com_dv_embutido(beneficiario, pagamento):
    perfil = dataclasses.replace(
        PERFIL_UNICRED,
        nosso_numero=FormatoNossoNumero(tamanho_total=11, tamanho_dv=1, dv_anexado=False),
    )
    montador = MontadorRemessa(perfil, beneficiario)
    linha = montador.montar_detalhe(novo_pagamento(nosso_numero="1239"), 1).desembrulhar()
    assert linha[192:203] == "00000001236"


def test_digitos_recalculados_a_cada_montagem(perfil, pagamento):
    beneficiario = criar_beneficiario(perfil, **{**CAMPOS_BENEFICIARIO, "agencia": "6"})
    linha = MontadorRemessa(perfil, beneficiario).montar_detalhe(pagamento, 1).desembrulhar()
    assert linha[1:7] == "00006X"


def test_montador_recusa_beneficiario_invalido(perfil):
    beneficiario = criar_beneficiario(perfil, **{**CAMPOS_BENEFICIARIO, "empresa_mae": ""})
    with pytest.raises(ConfigurationValidationError):
        MontadorRemessa(perfil, beneficiario)


def test_gerar(montador):
    pagamentos = [novo_pagamento(nosso_numero=str(n)) for n in (1, 2, 3)]
    arquivo = montador.gerar(pagamentos, DATA_GERACAO)

    assert len(arquivo.linhas) == 4
    assert all(len(linha) == 400 for linha in arquivo.linhas)
    assert [linha[394:400] for linha in arquivo.detalhes] == ["000001", "000002", "000003"]
    assert arquivo.falhas == []
    assert arquivo.codigo_banco == "136"

    conteudo = arquivo.conteudo()
    assert conteudo.endswith("\r\n")
    assert conteudo.split("\r\n")[:-1] == arquivo.linhas


def test_gerar_sem_pagamentos(montador):
    arquivo = montador.gerar([], DATA_GERACAO)
    assert arquivo.linhas == [arquivo.header]


def test_gerar_aborta_no_pagamento_invalido(montador):
    pagamentos = [novo_pagamento(), novo_pagamento(cep_sacado="123"), novo_pagamento()]
    with pytest.raises(PaymentValidationError) as exc:
        montador.gerar(pagamentos, DATA_GERACAO)
    assert exc.value.sequencial == 2
    assert "cep_sacado" in {v.campo for v in exc.value.violacoes}


def test_gerar_ignora_e_renumera(montador, caplog):
    pagamentos = [
        novo_pagamento(nosso_numero="1"),
        novo_pagamento(nosso_numero="2", nome_sacado=""),
        novo_pagamento(nosso_numero="3"),
    ]
    with caplog.at_level(logging.WARNING, logger="remessa.cnab400.registro"):
        arquivo = montador.gerar(pagamentos, DATA_GERACAO, politica=POLITICA_IGNORAR)

    assert len(arquivo.detalhes) == 2
    assert [linha[394:400] for linha in arquivo.detalhes] == ["000001", "000002"]
    assert arquivo.detalhes[1][192:202] == "0000000003"
    assert len(arquivo.falhas) == 1
    assert arquivo.falhas[0].identificacao.startswith("nosso número 2")
    assert "Pagamento ignorado" in caplog.text


def test_gerar_politica_desconhecida(montador, pagamento):
    with pytest.raises(ValueError):
        montador.gerar([pagamento], politica="continuar")


def test_gerar_remessa_por_codigo(pagamento):
    arquivo = gerar_remessa("136", CAMPOS_BENEFICIARIO, [pagamento], DATA_GERACAO)
    assert arquivo.header[76:79] == "136"
    assert len(arquivo.detalhes) == 1


def test_gerar_remessa_banco_desconhecido(pagamento):
    with pytest.raises(UnsupportedBankError):
        gerar_remessa("999", CAMPOS_BENEFICIARIO, [pagamento])


def test_gerar_remessa_de_dict(documento_json):
    arquivo = gerar_remessa_de_dict(documento_json, data_geracao=DATA_GERACAO)
    assert len(arquivo.detalhes) == 2
    segundo = arquivo.detalhes[1]
    assert segundo[126:139] == "0000000009990"
    assert segundo[218:220] == "02"
    assert segundo[150:156] == "181026"


@pytest.mark.parametrize(
    "alteracao",
    [
        {"banco": None},
        {"beneficiario": "x"},
        {"pagamentos": None},
        {"beneficiario": {**CAMPOS_BENEFICIARIO, "banco": "136"}},
    ],
)
def test_gerar_remessa_de_dict_mal_formado(documento_json, alteracao):
    documento_json.update(alteracao)
    with pytest.raises(ValueError):
        gerar_remessa_de_dict(documento_json)


def test_gerar_remessa_de_dict_nao_objeto():
    with pytest.raises(ValueError):
        gerar_remessa_de_dict([])


def test_linhas_sempre_ascii(montador):
    pagamentos = [
        novo_pagamento(nome_sacado="João Ñandú Ålvares", cidade_sacado="São José", bairro_sacado="Açores"),
        novo_pagamento(nome_avalista="Conceição & Cia", endereco_sacado="Praça º 1"),
    ]
    arquivo = montador.gerar(pagamentos, DATA_GERACAO)
    assert all(linha.isascii() and len(linha) == 400 for linha in arquivo.linhas)
    arquivo.conteudo().encode("ascii")


def test_digitos_nao_ascii_sao_pagamento_invalido(montador):
    resultado = montador.montar_detalhe(novo_pagamento(numero_documento="١٢٣"), 1)
    assert not resultado.ok
    assert [v.campo for v in resultado.violacoes] == ["numero_documento"]


def test_gerar_ignora_codigo_invalido(montador):
    pagamentos = [
        novo_pagamento(nosso_numero="1"),
        novo_pagamento(nosso_numero="2", codigo_multa="A"),
        novo_pagamento(nosso_numero="3"),
        novo_pagamento(nosso_numero="4"),
    ]
    arquivo = montador.gerar(pagamentos, DATA_GERACAO, politica=POLITICA_IGNORAR)

    assert [linha[394:400] for linha in arquivo.detalhes] == ["000001", "000002", "000003"]
    assert [f.identificacao.split(",")[0] for f in arquivo.falhas] == ["nosso número 2"]
    assert [v.campo for v in arquivo.falhas[0].violacoes] == ["codigo_multa"]


def test_gerar_valor_nao_representavel(documento_json):
    documento_json["pagamentos"][1]["valor"] = "1e30"
    with pytest.raises(FieldValueError) as exc:
        gerar_remessa_de_dict(documento_json, data_geracao=DATA_GERACAO)
    assert exc.value.campo == "valor"
    assert exc.value.sequencial == 2
    assert exc.value.identificacao.startswith("nosso número 124")
