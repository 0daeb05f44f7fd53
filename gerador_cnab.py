"""Ponto de entrada do gerador de remessa CNAB 400.

Este arquivo reexporta toda a API pública definida no pacote ``remessa``
e mantém o ponto de entrada de linha de comando.
"""

import sys

from remessa import *  # noqa: F401,F403
from remessa import __all__ as _REMESSA_ALL
from remessa.cli import main

__all__ = list(_REMESSA_ALL) + ["main"]


if __name__ == "__main__":
    sys.exit(main())
