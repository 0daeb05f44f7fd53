"""Perfil CNAB 400 da Unicred (banco 136)."""

from . import fontes
from .constants import (
    CNAB400_UNICRED_CARTEIRAS_VALIDAS,
    CNAB400_UNICRED_CODIGO_BANCO,
    CNAB400_UNICRED_COMPLEMENTO_HEADER,
    CNAB400_UNICRED_LARGURAS,
)
from .layout import alfa, brancos, de, fixo, num, pronto, zeros
from .perfil import FormatoNossoNumero, PerfilBanco
from .validacao import ApenasDigitos, Inclusao, Presenca, Tamanho

REGRAS_BENEFICIARIO_UNICRED = (
    Presenca("agencia"),
    Presenca("conta_corrente"),
    Presenca("documento_cedente"),
    Presenca("digito_conta"),
    Presenca("codigo_beneficiario"),
    Presenca("empresa_mae"),
    Tamanho("agencia", "deve ter 4 dígitos.", maximo=4),
    Tamanho("conta_corrente", "deve ter 5 dígitos.", maximo=5),
    Tamanho("documento_cedente", "deve ter entre 11 e 14 dígitos.", minimo=11, maximo=14),
    Tamanho("carteira", "deve ter 2 dígitos.", maximo=2),
    Tamanho("digito_conta", "deve ter 1 dígito.", maximo=1),
    Tamanho("codigo_beneficiario", "deve ter 20 dígitos.", maximo=20),
    Tamanho("empresa_mae", "deve ter no máximo 30 caracteres.", maximo=30),
    Tamanho("sequencial_remessa", "deve ter no máximo 7 dígitos.", maximo=7),
    ApenasDigitos("agencia"),
    ApenasDigitos("conta_corrente"),
    ApenasDigitos("carteira"),
    ApenasDigitos("codigo_beneficiario"),
    ApenasDigitos("sequencial_remessa"),
    Inclusao("carteira", CNAB400_UNICRED_CARTEIRAS_VALIDAS),
)

# CAMPO                                                             POSIÇÃO
LAYOUT_HEADER_UNICRED = (
    fixo("tipo_registro", "0"),                                         # 001
    fixo("operacao", "1"),                                              # 002
    fixo("literal_remessa", "REMESSA"),                                 # 003-009
    fixo("codigo_servico", "01"),                                       # 010-011
    fixo("literal_servico", "COBRANCA".ljust(15)),                      # 012-026
    num("codigo_beneficiario", 20, de("beneficiario.codigo_beneficiario")),  # 027-046
    alfa("empresa_mae", 30, de("beneficiario.empresa_mae")),            # 047-076
    pronto("codigo_banco", 3, de("perfil.codigo")),                     # 077-079
    pronto("nome_banco", 15, de("perfil.nome_banco")),                  # 080-094
    pronto("data_geracao", 6, fontes.data_geracao),                     # 095-100
    brancos("brancos_101_107", 7),                                      # 101-107
    fixo("variacao_carteira", "000"),                                   # 108-110
    num("sequencial_remessa", 7, de("beneficiario.sequencial_remessa")),  # 111-117
    pronto("complemento", 277, fontes.complemento_header(277)),         # 118-394
    fixo("sequencial_registro", "000001"),                              # 395-400
)

LAYOUT_DETALHE_UNICRED = (
    fixo("tipo_registro", "1"),                                         # 001
    num("agencia", 5, de("beneficiario.agencia")),                      # 002-006
    pronto("digito_agencia", 1, fontes.digito_agencia),                 # 007
    num("conta_corrente", 12, de("beneficiario.conta_corrente")),       # 008-019
    pronto("digito_conta", 1, fontes.digito_conta),                     # 020
    zeros("zero_021", 1),                                               # 021
    num("carteira", 3, de("beneficiario.carteira")),                    # 022-024
    zeros("zeros_025_037", 13),                                         # 025-037
    brancos("controle_participante", 25),                               # 038-062
    pronto("codigo_banco_compensacao", 3, de("perfil.codigo")),         # 063-065
    zeros("zeros_066_067", 2),                                          # 066-067
    brancos("brancos_068_092", 25),                                     # 068-092
    zeros("filler_093", 1),                                             # 093
    num("codigo_multa", 1, de("pagamento.codigo_multa")),               # 094
    num("percentual_multa", 10, fontes.em_centavos("percentual_multa")),  # 095-104
    num("tipo_mora", 1, de("pagamento.tipo_mora")),                     # 105
    fixo("titulo_descontavel", "N"),                                    # 106
    brancos("brancos_107_108", 2),                                      # 107-108
    num("identificacao_ocorrencia", 2, de("pagamento.identificacao_ocorrencia")),  # 109-110
    num("numero_documento", 10, de("pagamento.numero_documento")),      # 111-120
    pronto("data_vencimento", 6, fontes.data_pagamento("data_vencimento")),  # 121-126
    num("valor", 13, fontes.em_centavos("valor")),                      # 127-139
    zeros("zeros_140_149", 10),                                         # 140-149
    num("cod_desconto", 1, de("pagamento.cod_desconto")),               # 150
    pronto("data_emissao", 6, fontes.data_pagamento("data_emissao")),   # 151-156
    zeros("filler_157", 1),                                             # 157
    num("codigo_protesto", 1, de("pagamento.codigo_protesto")),         # 158
    num("dias_protesto", 2, de("pagamento.dias_protesto")),             # 159-160
    num("valor_mora", 13, fontes.em_centavos("valor_mora")),            # 161-173
    pronto("data_desconto", 6, fontes.data_pagamento("data_desconto")),  # 174-179
    num("valor_desconto", 13, fontes.em_centavos("valor_desconto")),    # 180-192
    pronto("nosso_numero", 11, fontes.nosso_numero_com_dv),             # 193-203
    zeros("zeros_204_205", 2),                                          # 204-205
    num("valor_abatimento", 13, fontes.em_centavos("valor_abatimento")),  # 206-218
    pronto("tipo_inscricao_pagador", 2, de("pagamento.identificacao_sacado")),  # 219-220
    num("documento_pagador", 14, fontes.documento_sacado),              # 221-234
    alfa("nome_pagador", 40, de("pagamento.nome_sacado")),              # 235-274
    alfa("endereco_pagador", 40, de("pagamento.endereco_sacado")),      # 275-314
    alfa("bairro_pagador", 12, de("pagamento.bairro_sacado")),          # 315-326
    num("cep_pagador", 8, de("pagamento.cep_sacado")),                  # 327-334
    alfa("cidade_pagador", 20, de("pagamento.cidade_sacado")),          # 335-354
    alfa("uf_pagador", 2, de("pagamento.uf_sacado")),                   # 355-356
    alfa("nome_avalista", 38, de("pagamento.nome_avalista")),           # 357-394
    num("sequencial_registro", 6, de("sequencial")),                    # 395-400
)

PERFIL_UNICRED = PerfilBanco(
    identificador="unicred",
    codigo=CNAB400_UNICRED_CODIGO_BANCO,
    nome="UNICRED",
    mapeamento_agencia={10: "X", 11: "0"},
    mapeamento_conta={10: "0", 11: "0"},
    mapeamento_nosso_numero={10: "0", 11: "0"},
    nosso_numero=FormatoNossoNumero(tamanho_total=11, tamanho_dv=1, dv_anexado=True),
    larguras=CNAB400_UNICRED_LARGURAS,
    carteiras=CNAB400_UNICRED_CARTEIRAS_VALIDAS,
    regras_beneficiario=REGRAS_BENEFICIARIO_UNICRED,
    layout_header=LAYOUT_HEADER_UNICRED,
    layout_detalhe=LAYOUT_DETALHE_UNICRED,
    complemento_header=CNAB400_UNICRED_COMPLEMENTO_HEADER,
)
