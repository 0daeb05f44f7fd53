from datetime import datetime

from flask import Flask, Response, jsonify, request
from gerador_cnab import (
    POLITICAS,
    RemessaError,
    criar_registro_padrao,
    gerar_remessa_de_dict,
)


def resposta_erro(exc, status):
    """
    Corpo JSON de erro com a lista de violações (quando a exceção tiver).
    """
    violacoes = getattr(exc, "violacoes", None) or []
    return jsonify({
        "erro": str(exc),
        "violacoes": [str(v) for v in violacoes],
    }), status


app = Flask(__name__)
app.config.from_mapping(
    POLITICA_PAGAMENTO_INVALIDO="abortar",
)
app.config.from_prefixed_env("GERADOR_CNAB")


@app.route("/bancos")
def bancos():
    """
    Lista os perfis de banco disponíveis para geração de remessa.
    """
    return jsonify([
        {
            "codigo": perfil.codigo,
            "identificador": perfil.identificador,
            "nome": perfil.nome,
            "carteiras": sorted(perfil.carteiras),
        }
        for perfil in criar_registro_padrao().perfis()
    ])


@app.route("/remessa", methods=["POST"])
def remessa():
    """
    Recebe o documento JSON (banco, beneficiário e pagamentos) e devolve
    o arquivo de remessa como texto.
    """
    dados = request.get_json(silent=True)
    if dados is None:
        return jsonify({"erro": "Envie um documento JSON.", "violacoes": []}), 400

    politica = request.args.get("politica") or app.config["POLITICA_PAGAMENTO_INVALIDO"]
    if politica not in POLITICAS:
        return jsonify({"erro": f"Política inválida: {politica}", "violacoes": []}), 400

    data_geracao = None
    if request.args.get("data"):
        try:
            data_geracao = datetime.strptime(request.args["data"], "%Y-%m-%d").date()
        except ValueError as exc:
            return resposta_erro(exc, 400)

    try:
        arquivo = gerar_remessa_de_dict(dados, data_geracao=data_geracao, politica=politica)
    except ValueError as exc:
        return resposta_erro(exc, 400)
    except RemessaError as exc:
        return resposta_erro(exc, 422)

    nome = f"remessa_{arquivo.codigo_banco}.rem"
    resposta = Response(arquivo.conteudo(), mimetype="text/plain")
    resposta.headers["Content-Disposition"] = f"attachment; filename={nome}"
    resposta.headers["X-Remessa-Detalhes"] = str(len(arquivo.detalhes))
    resposta.headers["X-Remessa-Ignorados"] = str(len(arquivo.falhas))
    return resposta


if __name__ == "__main__":
    # debug=True é útil durante o desenvolvimento
    app.run(debug=True)
