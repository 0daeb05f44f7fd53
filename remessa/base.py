"""Shared utilities and helpers for CNAB remessa generation."""

from .exceptions import ChecksumConfigurationError, FieldValueError

ESTADOS_BR = {
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES",
    "GO", "MA", "MT", "MS", "MG", "PA", "PB", "PR",
    "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC",
    "SP", "SE", "TO",
}

def apenas_digitos(texto: str) -> bool:
    """
    Verdadeiro só para dígitos ASCII 0-9 (sem "²", "١" etc.).
    """
    return texto.isascii() and texto.isdigit()

def limpar_numero(s: str) -> str:
    """
    Remove todos os caracteres que não são dígitos ASCII.
    """
    return "".join(ch for ch in (s or "") if "0" <= ch <= "9")

def validar_cpf(cpf: str) -> bool:
    cpf = limpar_numero(cpf)
    if len(cpf) != 11:
        return False
    if cpf == cpf[0] * 11:
        return False

    soma = 0
    for i in range(9):
        soma += int(cpf[i]) * (10 - i)
    resto = (soma * 10) % 11
    if resto == 10:
        resto = 0
    if resto != int(cpf[9]):
        return False

    soma = 0
    for i in range(10):
        soma += int(cpf[i]) * (11 - i)
    resto = (soma * 10) % 11
    if resto == 10:
        resto = 0
    if resto != int(cpf[10]):
        return False

    return True

def validar_cnpj(cnpj: str) -> bool:
    cnpj = limpar_numero(cnpj)
    if len(cnpj) != 14:
        return False
    if cnpj == cnpj[0] * 14:
        return False

    pesos1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    pesos2 = [6] + pesos1

    soma = sum(int(cnpj[i]) * pesos1[i] for i in range(12))
    resto = soma % 11
    dv1 = 0 if resto < 2 else 11 - resto
    if dv1 != int(cnpj[12]):
        return False

    soma = sum(int(cnpj[i]) * pesos2[i] for i in range(13))
    resto = soma % 11
    dv2 = 0 if resto < 2 else 11 - resto
    if dv2 != int(cnpj[13]):
        return False

    return True

def modulo11(numero: str, mapeamento=None, perfil: str = "") -> str:
    """
    Calcula o dígito verificador pelo módulo 11 com pesos de 2 a 9.

    Regra:
      - pesos de 2 a 9 (repetindo) da direita para a esquerda
      - resultado = 11 - (soma % 11)
      - resultados 10 e 11 são trocados pelo símbolo do ``mapeamento``
        do banco (ex.: {10: 'X', 11: '0'}); sem mapeamento é erro de
        configuração do perfil.
    """
    numero = str(numero)
    if not apenas_digitos(numero):
        raise FieldValueError("modulo11", numero)
    mapeamento = mapeamento or {}

    soma = 0
    peso = 2
    for d in reversed(numero):
        soma += int(d) * peso
        peso += 1
        if peso > 9:
            peso = 2

    valor = 11 - (soma % 11)
    if valor in mapeamento:
        return str(mapeamento[valor])
    if valor >= 10:
        raise ChecksumConfigurationError(valor, mapeamento, perfil)
    return str(valor)
