"""
Cliente da API de colaboradores, equivalente à tela de gestão: um formulário
(nome, cargo, idade), o id em edição e a lista completa, recarregada do
servidor depois de cada alteração.
"""
import logging
import requests
from typing import List, Optional

from . import config
from .models import Colaborador

logger = logging.getLogger(__name__)

class ColaboradoresAPI:
    """Acesso HTTP ao recurso /colaboradores."""

    def __init__(self, base_url: str = None, session=None):
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.session = session or requests.Session()

    def listar(self) -> List[Colaborador]:
        response = self.session.get(self.base_url)
        response.raise_for_status()
        return [Colaborador(**item) for item in response.json()]

    def adicionar(self, nome, cargo, idade) -> str:
        response = self.session.post(self.base_url, json={"nome": nome, "cargo": cargo, "idade": idade})
        response.raise_for_status()
        return response.text

    def atualizar(self, colaborador_id: int, nome, cargo, idade) -> str:
        response = self.session.put(
            f"{self.base_url}/{colaborador_id}",
            json={"nome": nome, "cargo": cargo, "idade": idade}
        )
        response.raise_for_status()
        return response.text

    def deletar(self, colaborador_id: int) -> str:
        response = self.session.delete(f"{self.base_url}/{colaborador_id}")
        response.raise_for_status()
        return response.text


class GestaoColaboradores:
    """Estado local da tela. Falhas de rede só vão para o log."""

    def __init__(self, api: ColaboradoresAPI):
        self.api = api
        self.colaboradores: List[Colaborador] = []
        self.nome = ""
        self.cargo = ""
        self.idade = ""
        self.edit_id: Optional[int] = None

    def carregar(self) -> None:
        try:
            self.colaboradores = self.api.listar()
        except requests.RequestException as e:
            logger.error("Erro ao buscar colaboradores: %s", e)

    def submeter(self) -> None:
        """Adiciona ou atualiza, conforme haja um colaborador em edição."""
        if self.edit_id is None:
            acao, mensagem = self.api.adicionar, "Erro ao adicionar colaborador"
            args = (self.nome, self.cargo, self.idade)
        else:
            acao, mensagem = self.api.atualizar, "Erro ao atualizar colaborador"
            args = (self.edit_id, self.nome, self.cargo, self.idade)

        try:
            acao(*args)
        except requests.RequestException as e:
            logger.error("%s: %s", mensagem, e)
            return

        self.cancelar()
        self.carregar()

    def editar(self, colaborador: Colaborador) -> None:
        self.nome = colaborador.nome or ""
        self.cargo = colaborador.cargo or ""
        self.idade = "" if colaborador.idade is None else str(colaborador.idade)
        self.edit_id = colaborador.id

    def cancelar(self) -> None:
        self.nome = ""
        self.cargo = ""
        self.idade = ""
        self.edit_id = None

    def deletar(self, colaborador_id: int) -> None:
        try:
            self.api.deletar(colaborador_id)
        except requests.RequestException as e:
            logger.error("Erro ao deletar colaborador: %s", e)
            return
        self.carregar()

    def render(self) -> List[str]:
        return [f"{c.nome} - {c.cargo} - {c.idade} anos" for c in self.colaboradores]
