import logging
import psycopg
from fastapi import HTTPException
from typing import List

from . import config
from .models import Colaborador, ColaboradorBase

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS colaboradores (
        id SERIAL PRIMARY KEY,
        nome TEXT NOT NULL,
        cargo TEXT NOT NULL,
        idade INTEGER NOT NULL
    )
"""

def get_db_connection():
    """Estabelece uma conexão com o banco de dados PostgreSQL."""
    try:
        conn = psycopg.connect(
            dbname=config.DB_NAME,
            user=config.DB_USER,
            password=config.DB_PASSWORD,
            host=config.DB_HOST,
            port=config.DB_PORT,
            autocommit=True
        )
        return conn
    except psycopg.OperationalError as e:
        logger.error("Erro ao conectar ao banco de dados: %s", e)
        raise

def get_conexao():
    """Dependência do FastAPI: uma conexão por requisição, fechada ao final."""
    try:
        conn = get_db_connection()
    except psycopg.OperationalError as e:
        raise HTTPException(status_code=500, detail=f"Erro de conexão com o banco de dados: {e}")

    try:
        yield conn
    finally:
        conn.close()

def create_table(conn) -> None:
    """Cria a tabela de colaboradores caso ainda não exista."""
    with conn.cursor() as cur:
        cur.execute(CREATE_TABLE_SQL)
    logger.info("Tabela colaboradores verificada")

def create_colaborador(conn, dados: ColaboradorBase) -> None:
    """Insere um novo colaborador. O id gerado não é devolvido."""
    with conn.cursor() as cur:
        cur.execute(
            "INSERT INTO colaboradores (nome, cargo, idade) VALUES (%s, %s, %s)",
            (dados.nome, dados.cargo, dados.idade)
        )
    logger.info("Colaborador adicionado: %s", dados.nome)

def get_colaboradores(conn) -> List[Colaborador]:
    """Busca todos os colaboradores da tabela."""
    with conn.cursor() as cur:
        cur.execute("SELECT id, nome, cargo, idade FROM colaboradores ORDER BY id")
        rows = cur.fetchall()
    return [
        Colaborador(
            id=row[0],
            nome=row[1],
            cargo=row[2],
            idade=row[3]
        ) for row in rows
    ]

def update_colaborador(conn, colaborador_id: int, dados: ColaboradorBase) -> int:
    """
    Sobrescreve nome, cargo e idade do colaborador com o id informado.
    Não verifica se o registro existe; devolve a quantidade de linhas afetadas.
    """
    with conn.cursor() as cur:
        cur.execute(
            "UPDATE colaboradores SET nome = %s, cargo = %s, idade = %s WHERE id = %s",
            (dados.nome, dados.cargo, dados.idade, colaborador_id)
        )
        afetadas = cur.rowcount
    logger.info("Colaborador %s atualizado (%s linha(s))", colaborador_id, afetadas)
    return afetadas

def delete_colaborador(conn, colaborador_id: int) -> int:
    """Remove o colaborador com o id informado, exista ele ou não."""
    with conn.cursor() as cur:
        cur.execute("DELETE FROM colaboradores WHERE id = %s", (colaborador_id,))
        afetadas = cur.rowcount
    logger.info("Colaborador %s deletado (%s linha(s))", colaborador_id, afetadas)
    return afetadas
