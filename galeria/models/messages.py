"""
Mensagens de requisição/resposta trocadas entre o controlador e o transporte.

O id do aluno funciona como id de correlação: uma resposta só é aplicada
se ainda corresponder ao aluno selecionado.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..utils.exceptions import NetworkFailure
from .student import StudentId


@dataclass(frozen=True)
class StudentsRequest:
    pass


@dataclass(frozen=True)
class StudentsResponse:
    payload: Optional[List[Dict[str, Any]]] = None
    error: Optional[NetworkFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class EvaluationRequest:
    student_id: StudentId


@dataclass(frozen=True)
class EvaluationResponse:
    student_id: StudentId
    payload: Optional[Dict[str, Any]] = None
    error: Optional[NetworkFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None
