from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .student import Evaluation, Student


class LoadPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class GalleryState:
    students: Tuple[Student, ...] = ()
    loading: bool = True
    current_page: int = 1
    page_size: int = 0

    @property
    def total(self) -> int:
        return len(self.students)

    @property
    def page_count(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total // self.page_size)


@dataclass(frozen=True)
class ModalState:
    visible: bool = False
    selected_student: Optional[Student] = None
    evaluation: Optional[Evaluation] = None
    evaluation_loading: bool = False

    @property
    def not_found(self) -> bool:
        """Modal aberto, carregamento terminado e nenhuma avaliação."""
        return self.visible and not self.evaluation_loading and self.evaluation is None
