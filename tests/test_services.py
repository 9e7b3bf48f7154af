import pytest

from todoapi.errors import REPOSITORY_ERROR_CODE, CommonError, RepositoryError
from todoapi.models import CreateTodo, Todo
from todoapi.queries import ResultPaging, TodoQueryParams, TodoRepository
from todoapi.services import DefaultTodoService


class MemoryRepository(TodoRepository):
    def __init__(self):
        self.items = {}
        self.next_id = 1
        self.seen_params = []

    def create(self, new_todo):
        todo = Todo(
            id=self.next_id,
            title=new_todo.title,
            description=new_todo.description,
            completed=False,
        )
        self.items[todo.id] = todo
        self.next_id += 1
        return todo

    def list(self, params):
        self.seen_params.append(params)
        values = sorted(self.items.values(), key=lambda t: t.id)
        start = params.page_offset()
        return ResultPaging(total=0, items=values[start : start + params.page_limit()])

    def get(self, todo_id):
        try:
            return self.items[todo_id]
        except KeyError:
            raise RepositoryError("missing") from None

    def delete(self, todo_id):
        self.items.pop(todo_id, None)


class FailingRepository(TodoRepository):
    def create(self, new_todo):
        raise RepositoryError("create failed")

    def list(self, params):
        raise RepositoryError("list failed")

    def get(self, todo_id):
        raise RepositoryError("get failed")

    def delete(self, todo_id):
        raise RepositoryError("delete failed")


@pytest.fixture
def service():
    return DefaultTodoService(MemoryRepository())


def test_create_and_get_round_trip(service):
    created = service.create(CreateTodo(title="write", description="report"))
    assert service.get(created.id) == created
    assert created.title == "write"


def test_list_passes_params_through(service):
    for n in range(4):
        service.create(CreateTodo(title=f"t{n}", description="d"))
    params = TodoQueryParams(limit=2, offset=2)
    page = service.list(params)
    assert [t.title for t in page.items] == ["t2", "t3"]
    assert service.repository.seen_params == [params]


def test_delete_removes(service):
    created = service.create(CreateTodo(title="a", description="b"))
    service.delete(created.id)
    with pytest.raises(CommonError):
        service.get(created.id)


def test_get_missing_maps_to_common_error(service):
    with pytest.raises(CommonError) as info:
        service.get(99)
    assert info.value.message == "missing"
    assert info.value.code == REPOSITORY_ERROR_CODE


@pytest.mark.parametrize(
    "call, message",
    [
        (lambda s: s.create(CreateTodo(title="a", description="b")), "create failed"),
        (lambda s: s.list(TodoQueryParams()), "list failed"),
        (lambda s: s.get(1), "get failed"),
        (lambda s: s.delete(1), "delete failed"),
    ],
)
def test_repository_errors_become_common_errors(call, message):
    service = DefaultTodoService(FailingRepository())
    with pytest.raises(CommonError) as info:
        call(service)
    assert info.value.message == message
    assert info.value.code == REPOSITORY_ERROR_CODE
    assert isinstance(info.value.__cause__, RepositoryError)