import logging
import psycopg
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from typing import List

from .models import Colaborador, ColaboradorBase
from .services import (
    get_conexao,
    create_colaborador,
    get_colaboradores,
    update_colaborador,
    delete_colaborador,
)

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/colaboradores", status_code=201, response_class=PlainTextResponse)
def adicionar_colaborador(dados: ColaboradorBase, conn=Depends(get_conexao)):
    """Cria um novo colaborador."""
    try:
        create_colaborador(conn, dados)
    except psycopg.Error as e:
        logger.exception("Erro ao adicionar colaborador")
        raise HTTPException(status_code=500, detail=f"Erro ao adicionar colaborador: {e}")
    return "Colaborador adicionado"

@router.get("/colaboradores", response_model=List[Colaborador])
def listar_colaboradores(conn=Depends(get_conexao)):
    """Retorna a tabela completa de colaboradores."""
    try:
        return get_colaboradores(conn)
    except psycopg.Error:
        logger.exception("Erro ao buscar colaboradores")
        raise HTTPException(status_code=500, detail="Erro ao buscar colaboradores")

@router.put("/colaboradores/{colaborador_id}", response_class=PlainTextResponse)
def atualizar_colaborador(colaborador_id: int, dados: ColaboradorBase, conn=Depends(get_conexao)):
    """Sobrescreve todos os campos do colaborador. Um id inexistente também responde 200."""
    try:
        update_colaborador(conn, colaborador_id, dados)
    except psycopg.Error as e:
        logger.exception("Erro ao atualizar colaborador %s", colaborador_id)
        raise HTTPException(status_code=500, detail=f"Erro ao atualizar colaborador: {e}")
    return "Colaborador atualizado"

@router.delete("/colaboradores/{colaborador_id}", response_class=PlainTextResponse)
def deletar_colaborador(colaborador_id: int, conn=Depends(get_conexao)):
    try:
        delete_colaborador(conn, colaborador_id)
    except psycopg.Error as e:
        logger.exception("Erro ao deletar colaborador %s", colaborador_id)
        raise HTTPException(status_code=500, detail=f"Erro ao deletar colaborador: {e}")
    return "Colaborador deletado"
