"""
Perfil de banco para remessa CNAB 400.

Um perfil é só configuração: código e nome do banco, tabelas do módulo 11,
formato do nosso número, larguras e regras do beneficiário e os layouts de
header e detalhe. Os algoritmos (formatação, módulo 11, validação e montagem)
são os mesmos para todos os bancos.

Cadastrar um banco novo:
1. Criar o módulo ``remessa/cnab400/<banco>.py`` com uma constante PerfilBanco.
2. Registrá-la em ``criar_registro_padrao()``.
"""

from dataclasses import dataclass, field
from types import MappingProxyType

from ..base import apenas_digitos
from ..exceptions import ChecksumConfigurationError, UnsupportedBankError
from .layout import verificar_layout
from .utils import alfanumerico

RESULTADOS_ESPECIAIS_MODULO11 = (10, 11)


@dataclass(frozen=True)
class FormatoNossoNumero:
    """Largura total do nosso número no detalhe e posição do DV.

    ``dv_anexado=True``: o número recebido é a base e o DV é acrescentado.
    ``dv_anexado=False``: o número recebido já traz o DV na última posição,
    que é recalculado a partir da base.
    """

    tamanho_total: int
    tamanho_dv: int = 1
    dv_anexado: bool = True

    @property
    def tamanho_base(self) -> int:
        return self.tamanho_total - self.tamanho_dv


@dataclass(frozen=True)
class PerfilBanco:
    identificador: str
    codigo: str
    nome: str
    mapeamento_agencia: dict = field(hash=False)
    mapeamento_conta: dict = field(hash=False)
    mapeamento_nosso_numero: dict = field(hash=False)
    nosso_numero: FormatoNossoNumero
    larguras: dict = field(hash=False)
    carteiras: frozenset
    regras_beneficiario: tuple
    layout_header: tuple
    layout_detalhe: tuple
    complemento_header: str = ""
    apelidos: tuple = field(default=())

    def __post_init__(self) -> None:
        if len(self.codigo) != 3 or not apenas_digitos(self.codigo):
            raise ValueError(f"Código de banco inválido no perfil {self.identificador}: {self.codigo!r}")
        for tabela in (
            self.mapeamento_agencia,
            self.mapeamento_conta,
            self.mapeamento_nosso_numero,
        ):
            for resultado in RESULTADOS_ESPECIAIS_MODULO11:
                if resultado not in tabela:
                    raise ChecksumConfigurationError(resultado, tabela, self.identificador)
        # tabelas somente leitura depois de conferidas
        for nome in ("mapeamento_agencia", "mapeamento_conta", "mapeamento_nosso_numero", "larguras"):
            object.__setattr__(self, nome, MappingProxyType(dict(getattr(self, nome))))
        verificar_layout("header", self.layout_header, self.identificador)
        verificar_layout("detalhe", self.layout_detalhe, self.identificador)

    @property
    def nome_banco(self) -> str:
        """Nome do banco com 15 posições, como vai no header."""
        return alfanumerico(self.nome, 15)


class RegistroPerfis:
    """Registro dos perfis disponíveis, por identificador ou código do banco."""

    def __init__(self) -> None:
        self._perfis: dict[str, PerfilBanco] = {}

    def register(self, perfil: PerfilBanco) -> None:
        chaves = [perfil.identificador.lower(), perfil.codigo]
        chaves.extend(apelido.lower() for apelido in perfil.apelidos)
        for chave in chaves:
            if chave in self._perfis:
                raise ValueError(
                    f"Já existe um perfil registrado para '{chave}': "
                    f"{self._perfis[chave].identificador}."
                )
        for chave in chaves:
            self._perfis[chave] = perfil

    def get(self, banco: str) -> PerfilBanco:
        """
        Raises:
            UnsupportedBankError: se não houver perfil para o banco.
        """
        chave = str(banco or "").strip().lower()
        if apenas_digitos(chave):
            chave = chave.rjust(3, "0")
        perfil = self._perfis.get(chave)
        if perfil is None:
            raise UnsupportedBankError(str(banco), self.available_banks)
        return perfil

    @property
    def available_banks(self) -> list[str]:
        return sorted({p.identificador for p in self._perfis.values()})

    def perfis(self) -> list[PerfilBanco]:
        unicos = {p.identificador: p for p in self._perfis.values()}
        return [unicos[nome] for nome in sorted(unicos)]

    def __len__(self) -> int:
        return len(self.available_banks)


def criar_registro_padrao() -> RegistroPerfis:
    registro = RegistroPerfis()

    from .unicred import PERFIL_UNICRED

    registro.register(PERFIL_UNICRED)

    return registro


_REGISTRO_PADRAO = None


def obter_perfil(banco: str) -> PerfilBanco:
    """Perfil pelo identificador ('unicred') ou código ('136')."""
    global _REGISTRO_PADRAO
    if _REGISTRO_PADRAO is None:
        _REGISTRO_PADRAO = criar_registro_padrao()
    return _REGISTRO_PADRAO.get(banco)
