"""Constantes dos perfis CNAB 400."""

CNAB400_UNICRED_CODIGO_BANCO = "136"

CNAB400_UNICRED_CARTEIRAS_VALIDAS = frozenset({"21"})

# Larguras usadas para completar com zeros os campos do beneficiário
CNAB400_UNICRED_LARGURAS = {
    "agencia": 4,
    "conta_corrente": 5,
    "carteira": 2,
    "codigo_beneficiario": 20,
    "sequencial_remessa": 7,
}

CNAB400_UNICRED_COMPLEMENTO_HEADER = "codigo_beneficiario"
