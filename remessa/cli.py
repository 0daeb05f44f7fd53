"""Utilitario de linha de comando do gerador de remessa CNAB 400.

Uso:
    # Gera a remessa a partir de um documento JSON
    gerador-cnab entrada.json -o CB181026.REM

    # Forca o banco e a data de geracao
    gerador-cnab entrada.json --banco 136 --data 2026-10-18

    # Pula pagamentos invalidos em vez de abortar o arquivo
    gerador-cnab entrada.json --politica ignorar
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from .cnab400 import POLITICA_ABORTAR, POLITICAS, criar_registro_padrao, gerar_remessa_de_dict
from .exceptions import RemessaError


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.listar_bancos:
        for perfil in criar_registro_padrao().perfis():
            print(f"{perfil.codigo} - {perfil.identificador} ({perfil.nome})")
        return 0

    if not args.entrada:
        print("Erro: informe o arquivo JSON de entrada.")
        return 1

    entrada = Path(args.entrada)
    if not entrada.is_file():
        print("Erro: arquivo nao encontrado. Verifique o caminho e tente novamente.")
        return 1

    try:
        with open(entrada, "r", encoding="utf-8") as f:
            dados = json.load(f)
    except json.JSONDecodeError as exc:
        print(f"Erro: JSON invalido em {entrada}: {exc}")
        return 1

    print("=== Gerador de remessa CNAB 400 ===")
    try:
        data_geracao = _parse_data_geracao(args.data)
        arquivo = gerar_remessa_de_dict(
            dados,
            banco=args.banco,
            data_geracao=data_geracao,
            politica=args.politica,
        )
    except ValueError as exc:
        print(f"Erro nos dados de entrada: {exc}")
        return 1
    except RemessaError as exc:
        print("Nao foi possivel gerar a remessa:")
        for violacao in getattr(exc, "violacoes", None) or [exc]:
            print("   -", violacao)
        return 1

    saida = Path(args.saida) if args.saida else entrada.with_suffix(".rem")
    with open(saida, "w", encoding="ascii", newline="") as f:
        f.write(arquivo.conteudo())

    print(f"Banco: {arquivo.codigo_banco} - {arquivo.nome_banco.strip()}")
    print(f"Detalhes gerados: {len(arquivo.detalhes)}")
    if arquivo.falhas:
        print("Pagamentos ignorados:")
        for falha in arquivo.falhas:
            print("   -", falha.identificacao)
            for violacao in falha.violacoes:
                print("      *", violacao)
    print(f"OK. Remessa gravada em {saida}")
    return 0


def _parse_data_geracao(valor):
    if not valor:
        return None
    try:
        return datetime.strptime(valor, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Data de geracao '{valor}' invalida (use AAAA-MM-DD).") from None


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gerador-cnab",
        description="Gera arquivos de remessa CNAB 400 a partir de um documento JSON.",
    )
    parser.add_argument("entrada", nargs="?", help="Documento JSON com banco, beneficiario e pagamentos.")
    parser.add_argument("-o", "--saida", help="Arquivo de remessa gerado (padrao: entrada com extensao .rem).")
    parser.add_argument("--banco", help="Identificador ou codigo do banco (sobrepoe o do JSON).")
    parser.add_argument("--data", help="Data de geracao AAAA-MM-DD (padrao: hoje).")
    parser.add_argument(
        "--politica",
        choices=POLITICAS,
        default=POLITICA_ABORTAR,
        help="O que fazer com pagamento invalido (padrao: abortar).",
    )
    parser.add_argument("--listar-bancos", action="store_true", help="Lista os bancos suportados.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detalhado.")
    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
