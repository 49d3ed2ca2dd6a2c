import pytest

from galeria.data import InMemorySessionStore, SessionCache
from galeria.services import GalleryController
from galeria.utils.exceptions import NetworkFailure


def make_students(count: int):
    return [
        {"id": i, "name_estudante": f"Aluno {i}", "photo": None if i % 2 else f"https://fotos/{i}.png"}
        for i in range(1, count + 1)
    ]


class FakeStudentApi:
    """Transporte falso que registra as chamadas feitas pelo controlador."""

    def __init__(self, students=None, evaluations=None, fail_students=False, fail_evaluations=False):
        self.students = students if students is not None else []
        self.evaluations = evaluations or {}
        self.fail_students = fail_students
        self.fail_evaluations = fail_evaluations
        self.student_calls = 0
        self.evaluation_calls = []

    def get_students(self):
        self.student_calls += 1
        if self.fail_students:
            raise NetworkFailure("Erro HTTP 500", url="http://api/estudantes", status_code=500)
        return list(self.students)

    def get_evaluation(self, student_id):
        self.evaluation_calls.append(student_id)
        if self.fail_evaluations:
            raise NetworkFailure("Erro HTTP 404", url=f"http://api/avaliacao/{student_id}", status_code=404)
        return self.evaluations.get(student_id)


class Notifications:
    def __init__(self):
        self.messages = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def cache(store):
    return SessionCache(store)


@pytest.fixture
def notifications():
    return Notifications()


@pytest.fixture
def api():
    return FakeStudentApi(
        students=make_students(12),
        evaluations={
            1: {"nota": 9.5, "professor": "Ana", "materia": "Matemática", "sala": "101"},
            2: {"nota": 7, "professor": "Bruno", "materia": "História", "sala": "202"},
        }
    )


@pytest.fixture
def controller(api, cache, notifications):
    return GalleryController(api=api, cache=cache, notify_error=notifications)
