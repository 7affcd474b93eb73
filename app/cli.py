"""
Linha de comando da gestão de colaboradores.

Uso:
    colaboradores serve
    colaboradores init-db
    colaboradores listar
    colaboradores adicionar "Ana" "Dev" 30
    colaboradores atualizar 1 "Ana" "Lead" 31
    colaboradores deletar 1
"""
import argparse
import logging
import psycopg

from . import config, services
from .client import ColaboradoresAPI, GestaoColaboradores

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="colaboradores", description="Gestão de Colaboradores")
    parser.add_argument("--api-url", default=config.API_URL, help="URL do recurso /colaboradores")
    sub = parser.add_subparsers(dest="comando", required=True)

    sub.add_parser("serve", help="Inicia a API")
    sub.add_parser("init-db", help="Cria a tabela colaboradores se não existir")
    sub.add_parser("listar", help="Lista os colaboradores")

    adicionar = sub.add_parser("adicionar", help="Adiciona um colaborador")
    adicionar.add_argument("nome")
    adicionar.add_argument("cargo")
    adicionar.add_argument("idade")

    atualizar = sub.add_parser("atualizar", help="Atualiza um colaborador")
    atualizar.add_argument("id", type=int)
    atualizar.add_argument("nome")
    atualizar.add_argument("cargo")
    atualizar.add_argument("idade")

    deletar = sub.add_parser("deletar", help="Remove um colaborador")
    deletar.add_argument("id", type=int)
    return parser

def init_db() -> int:
    try:
        conn = services.get_db_connection()
    except psycopg.OperationalError:
        logger.error("Não foi possível criar a tabela: banco de dados indisponível")
        return 1

    try:
        services.create_table(conn)
    except psycopg.Error as e:
        logger.error("Erro ao criar a tabela colaboradores: %s", e)
        return 1
    finally:
        conn.close()
    return 0

def main(argv=None, session=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)

    if args.comando == "serve":
        from .main import run
        run()
        return 0
    if args.comando == "init-db":
        return init_db()

    tela = GestaoColaboradores(ColaboradoresAPI(args.api_url, session=session))
    if args.comando == "adicionar":
        tela.nome, tela.cargo, tela.idade = args.nome, args.cargo, args.idade
        tela.submeter()
    elif args.comando == "atualizar":
        tela.nome, tela.cargo, tela.idade = args.nome, args.cargo, args.idade
        tela.edit_id = args.id
        tela.submeter()
    elif args.comando == "deletar":
        tela.deletar(args.id)
    else:
        tela.carregar()

    for linha in tela.render():
        print(linha)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
