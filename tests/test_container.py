import pytest
import sqlalchemy as sa

from todoapi.container import Container
from todoapi.database import POSTGRESQL_DB_URI, create_db_engine, create_schema
from todoapi.errors import CommonError
from todoapi.models import CreateTodo, ServiceContext


@pytest.fixture
def engine(tmp_path):
    eng = sa.create_engine(f"sqlite:///{tmp_path / 'container.sqlite'}")
    create_schema(eng)
    return eng


def test_from_engine_todo_service_round_trip(engine):
    container = Container.from_engine(engine)
    created = container.todo_service.create(CreateTodo("write", "the tests"))
    fetched = container.todo_service.get(created.id)
    assert fetched == created
    assert fetched.title == "write"


def test_from_engine_todo_service_maps_errors(engine):
    container = Container.from_engine(engine)
    with pytest.raises(CommonError) as info:
        container.todo_service.get(12345)
    assert info.value.code == 1


def test_from_engine_service_context_shares_engine(engine):
    container = Container.from_engine(engine)
    assert container.service_context_service.is_maintenance_active() is False
    container.service_context_service.update(ServiceContext(1, True))
    other = Container.from_engine(engine)
    assert other.service_context_service.is_maintenance_active() is True


def test_from_environment_uses_database_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    url = f"sqlite:///{tmp_path / 'env.sqlite'}"
    monkeypatch.setenv(POSTGRESQL_DB_URI, url)
    create_schema(create_db_engine(url))
    container = Container.from_environment()
    created = container.todo_service.create(CreateTodo("a", "b"))
    listed = container.todo_service.list_params = None
    assert listed is None
    assert container.todo_service.get(created.id).description == "b"


def test_from_environment_requires_database_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(POSTGRESQL_DB_URI, raising=False)
    with pytest.raises(RuntimeError, match=POSTGRESQL_DB_URI):
        Container.from_environment()