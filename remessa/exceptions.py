"""
Exceções do gerador de remessa CNAB 400.

Hierarquia:
    RemessaError
    ├── ConfigurationValidationError   → beneficiário/perfil com violações
    │   └── LayoutConfigurationError   → layout de registro mal declarado
    ├── PaymentValidationError         → pagamento inválido (aborta o arquivo)
    ├── FieldError                     → falha ao formatar um campo do registro
    │   ├── FieldOverflowError         → valor numérico maior que o campo
    │   ├── FieldValueError            → valor não numérico em campo numérico
    │   └── LiteralWidthError          → literal com tamanho diferente do campo
    ├── ChecksumConfigurationError     → resultado do módulo 11 sem mapeamento
    └── UnsupportedBankError           → banco sem perfil cadastrado
"""


class RemessaError(Exception):
    """Base de todas as exceções do gerador."""


class ConfigurationValidationError(RemessaError):
    """Beneficiário ou perfil não atende às regras de validação.

    Carrega a lista completa de violações, não só a primeira.
    """

    def __init__(self, violacoes, perfil: str = ""):
        self.violacoes = list(violacoes)
        self.perfil = perfil
        prefixo = f"[{perfil}] " if perfil else ""
        detalhes = "; ".join(str(v) for v in self.violacoes)
        super().__init__(f"{prefixo}Configuração inválida: {detalhes}")


class LayoutConfigurationError(ConfigurationValidationError):
    """Layout de registro com tamanho total diferente de 400, nomes repetidos
    ou literais com largura errada."""


class PaymentValidationError(RemessaError):
    """Pagamento reprovado nas próprias regras; o registro não é montado."""

    def __init__(self, identificacao: str, violacoes=(), sequencial=None):
        self.identificacao = identificacao
        self.violacoes = list(violacoes)
        self.sequencial = sequencial
        mensagem = f"Pagamento inválido ({identificacao})"
        if sequencial is not None:
            mensagem += f" na posição {sequencial}"
        if self.violacoes:
            mensagem += ": " + "; ".join(str(v) for v in self.violacoes)
        super().__init__(mensagem)


class FieldError(RemessaError):
    """Falha de formatação de um campo.

    O montador acrescenta o pagamento, a posição e o perfil com
    ``contextualizar`` antes de propagar.
    """

    identificacao = None
    sequencial = None
    perfil = ""

    def contextualizar(self, identificacao: str, sequencial=None, perfil: str = ""):
        self.identificacao = identificacao
        self.sequencial = sequencial
        self.perfil = perfil
        prefixo = f"[{perfil}] " if perfil else ""
        posicao = f" na posição {sequencial}" if sequencial is not None else ""
        self.args = (f"{prefixo}Pagamento ({identificacao}){posicao}: {self.args[0]}",)
        return self


class FieldOverflowError(FieldError):
    """Valor numérico com mais dígitos que a largura do campo.

    Dados numéricos nunca são truncados.
    """

    def __init__(self, campo: str, valor, tamanho: int):
        self.campo = campo
        self.valor = valor
        self.tamanho = tamanho
        super().__init__(
            f"Campo '{campo or '?'}': valor '{valor}' excede {tamanho} posições."
        )


FieldTooLongError = FieldOverflowError


class FieldValueError(FieldError):
    def __init__(self, campo: str, valor, detalhe: str = "deve conter apenas dígitos"):
        self.campo = campo
        self.valor = valor
        super().__init__(f"Campo '{campo or '?'}': valor '{valor}' {detalhe}.")


class LiteralWidthError(FieldError):
    def __init__(self, campo: str, texto: str, tamanho: int):
        self.campo = campo
        self.texto = texto
        self.tamanho = tamanho
        super().__init__(
            f"Campo '{campo or '?'}': literal com {len(texto)} posições, esperado {tamanho}."
        )


class ChecksumConfigurationError(RemessaError):
    """Módulo 11 resultou em 10 ou 11 e o perfil não define o símbolo."""

    def __init__(self, valor: int, mapeamento, perfil: str = ""):
        self.valor = valor
        self.mapeamento = dict(mapeamento or {})
        self.perfil = perfil
        prefixo = f"[{perfil}] " if perfil else ""
        super().__init__(
            f"{prefixo}Módulo 11 resultou em {valor} sem mapeamento "
            f"(tabela: {self.mapeamento})."
        )


class UnsupportedBankError(RemessaError):
    def __init__(self, banco: str, disponiveis=()):
        self.banco = banco
        self.disponiveis = list(disponiveis)
        mensagem = f"Banco '{banco}' não possui perfil de remessa CNAB 400"
        if self.disponiveis:
            mensagem += f" (disponíveis: {', '.join(self.disponiveis)})"
        super().__init__(mensagem + ".")
