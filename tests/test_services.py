"""Tests for the SQL layer."""
import psycopg
import pytest

from app import config, services
from app.models import ColaboradorBase


def test_get_db_connection_uses_config(monkeypatch):
    chamadas = {}

    def fake_connect(**kwargs):
        chamadas.update(kwargs)
        return "conn"

    monkeypatch.setattr(psycopg, "connect", fake_connect)
    monkeypatch.setattr(config, "DB_NAME", "rh")

    assert services.get_db_connection() == "conn"
    assert chamadas["dbname"] == "rh"
    assert chamadas["host"] == config.DB_HOST
    assert chamadas["autocommit"] is True


def test_get_db_connection_reraises_operational_error(monkeypatch):
    def fake_connect(**kwargs):
        raise psycopg.OperationalError("sem rota")

    monkeypatch.setattr(psycopg, "connect", fake_connect)
    with pytest.raises(psycopg.OperationalError):
        services.get_db_connection()


def test_get_conexao_closes_connection(monkeypatch, banco):
    monkeypatch.setattr(services, "get_db_connection", lambda: banco)

    gen = services.get_conexao()
    assert next(gen) is banco
    with pytest.raises(StopIteration):
        next(gen)
    assert banco.closed


def test_statements_are_parameterized(banco):
    dados = ColaboradorBase(nome="Ana'; DROP TABLE colaboradores; --", cargo="Dev", idade=30)

    services.create_colaborador(banco, dados)
    query, params = banco.queries[-1]
    assert "%s" in query
    assert params == (dados.nome, "Dev", 30)

    services.update_colaborador(banco, 1, dados)
    query, params = banco.queries[-1]
    assert query.startswith("UPDATE colaboradores")
    assert params[-1] == 1


def test_get_colaboradores_builds_models(banco):
    services.create_colaborador(banco, ColaboradorBase(nome="Ana", cargo="Dev", idade=30))

    colaboradores = services.get_colaboradores(banco)
    assert len(colaboradores) == 1
    assert colaboradores[0].id == 1
    assert colaboradores[0].cargo == "Dev"


def test_update_and_delete_report_affected_rows(banco):
    dados = ColaboradorBase(nome="Ana", cargo="Dev", idade=30)
    services.create_colaborador(banco, dados)

    assert services.update_colaborador(banco, 1, dados) == 1
    assert services.update_colaborador(banco, 7, dados) == 0
    assert services.delete_colaborador(banco, 1) == 1
    assert services.delete_colaborador(banco, 1) == 0


def test_create_table(banco):
    services.create_table(banco)
    query, _ = banco.queries[-1]
    assert "CREATE TABLE IF NOT EXISTS colaboradores" in query


def test_driver_errors_propagate(banco):
    banco.falhar = True
    with pytest.raises(psycopg.Error):
        services.get_colaboradores(banco)


def test_create_table_columns_are_not_null(banco):
    services.create_table(banco)
    query, _ = banco.queries[-1]
    for coluna in ("nome TEXT NOT NULL", "cargo TEXT NOT NULL", "idade INTEGER NOT NULL"):
        assert coluna in query
