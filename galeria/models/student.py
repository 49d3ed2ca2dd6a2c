from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

StudentId = Union[int, str]


class Student(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: StudentId
    name_estudante: Optional[str] = Field(default=None, description="Nome exibido no card")
    photo: Optional[str] = Field(default=None, description="URL da foto do aluno")

    @field_validator("name_estudante", mode="before")
    @classmethod
    def _name_as_text(cls, value: Any) -> Optional[str]:
        # a API às vezes devolve números ou null no nome
        return None if value is None else str(value)

    @property
    def display_name(self) -> str:
        return self.name_estudante or f"Aluno {self.id}"


class Evaluation(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    nota: Union[float, int, str, None] = None
    professor: Optional[str] = None
    materia: Optional[str] = None
    sala: Optional[str] = None
