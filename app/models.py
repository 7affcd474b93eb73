from pydantic import BaseModel
from typing import Optional

class ColaboradorBase(BaseModel):
    nome: str
    cargo: str
    idade: int # Aceita número ou texto numérico vindo do formulário

class Colaborador(BaseModel):
    id: int
    # Linhas gravadas fora da API podem ter colunas nulas
    nome: Optional[str] = None
    cargo: Optional[str] = None
    idade: Optional[int] = None
