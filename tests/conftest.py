import psycopg
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services import get_conexao


class FakeCursor:
    """Cursor em memória que entende os comandos usados pela API."""

    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1
        self._result = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        self.conn.queries.append((query, params))
        if self.conn.falhar:
            raise psycopg.OperationalError("conexão perdida")

        comando = query.split()[0].upper()
        rows = self.conn.rows
        if comando == "INSERT":
            self.conn.next_id += 1
            rows[self.conn.next_id] = tuple(params)
            self.rowcount = 1
        elif comando == "SELECT":
            self._result = [(i,) + rows[i] for i in sorted(rows)]
            self.rowcount = len(self._result)
        elif comando == "UPDATE":
            nome, cargo, idade, colaborador_id = params
            self.rowcount = 0
            if colaborador_id in rows:
                rows[colaborador_id] = (nome, cargo, idade)
                self.rowcount = 1
        elif comando == "DELETE":
            self.rowcount = 1 if rows.pop(params[0], None) else 0

    def fetchall(self):
        return list(self._result)


class FakeConnection:
    def __init__(self):
        self.rows = {}
        self.next_id = 0
        self.queries = []
        self.falhar = False
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


@pytest.fixture
def banco():
    return FakeConnection()


@pytest.fixture
def client(banco):
    app.dependency_overrides[get_conexao] = lambda: banco
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
