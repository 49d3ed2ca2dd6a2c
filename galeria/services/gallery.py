from typing import Any, Callable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..models import (
    Evaluation,
    EvaluationRequest,
    EvaluationResponse,
    GalleryState,
    LoadPhase,
    ModalState,
    Student,
    StudentsRequest,
    StudentsResponse,
)
from ..data.cache import SessionCache
from ..utils.exceptions import CacheReadCorrupt, CacheWriteRejected, NetworkFailure
from ..utils.logger import get_logger

logger = get_logger(__name__)

STUDENTS_CACHE_KEY = "alunosData"
DEFAULT_PAGE_SIZE = 5
PAGE_SIZE_OPTIONS = (5, 10, 100)

STUDENTS_ERROR_MESSAGE = "Erro ao carregar alunos"
EVALUATION_ERROR_MESSAGE = "Erro ao carregar avaliação."


def evaluation_cache_key(student_id) -> str:
    return f"avaliacao_{student_id}"


def _log_notification(message: str) -> None:
    logger.error(message)


class GalleryController:
    """
    Orquestra a carga dos alunos e das avaliações usando o cache da sessão.

    Cada operação assíncrona é dividida em três passos: a transição de
    estado síncrona (que já mostra o carregamento), o I/O (fetch_*) e a
    aplicação da resposta (apply_*). Os snapshots `gallery` e `modal` são
    imutáveis e substituídos por inteiro a cada transição.
    """

    def __init__(self, api, cache: SessionCache,
                 notify_error: Optional[Callable[[str], None]] = None,
                 page_size: int = DEFAULT_PAGE_SIZE,
                 page_size_options: Sequence[int] = PAGE_SIZE_OPTIONS):
        self.api = api
        self.cache = cache
        self.notify_error = notify_error or _log_notification
        self.default_page_size = page_size
        self.page_size_options: Tuple[int, ...] = tuple(page_size_options)

        self.phase = LoadPhase.IDLE
        self._gallery = GalleryState()
        self._modal = ModalState()
        self._pending_evaluation: Optional[EvaluationRequest] = None

    @property
    def gallery(self) -> GalleryState:
        return self._gallery

    @property
    def modal(self) -> ModalState:
        return self._modal

    @property
    def pending_evaluation(self) -> Optional[EvaluationRequest]:
        return self._pending_evaluation

    # --- carga inicial -----------------------------------------------------

    def activate(self) -> Optional[StudentsRequest]:
        if self.phase is not LoadPhase.IDLE:
            return None
        self.phase = LoadPhase.LOADING

        cached = self._read_cache(STUDENTS_CACHE_KEY, [])
        # Lista vazia no cache conta como ausência de cache
        if isinstance(cached, list) and cached:
            students = self._parse_students(cached)
            if students is not None:
                logger.info(f"{len(students)} alunos carregados do cache da sessão")
                self._settle_students(students)
                return None
            logger.warning("Lista de alunos no cache é inválida; buscando na API")

        return StudentsRequest()

    def fetch_students(self, request: StudentsRequest) -> StudentsResponse:
        try:
            return StudentsResponse(payload=self.api.get_students())
        except NetworkFailure as e:
            return StudentsResponse(error=e)

    def apply_students(self, response: StudentsResponse) -> bool:
        if self.phase is not LoadPhase.LOADING:
            logger.debug("Resposta de alunos ignorada: nenhuma carga em andamento")
            return False

        students = self._parse_students(response.payload) if response.ok else None
        if students is None:
            if response.error is not None:
                logger.error(f"Falha ao buscar alunos: {response.error}")
            else:
                logger.error("Resposta de alunos com formato inválido")
            self.notify_error(STUDENTS_ERROR_MESSAGE)
            self.phase = LoadPhase.FAILED
            self._gallery = GalleryState(
                students=(),
                loading=False,
                current_page=self._gallery.current_page,
                page_size=self._gallery.page_size
            )
            return True

        self._write_cache(STUDENTS_CACHE_KEY, response.payload)
        logger.info(f"{len(students)} alunos carregados da API")
        self._settle_students(students)
        return True

    def load_students(self) -> GalleryState:
        request = self.activate()
        if request is not None:
            self.apply_students(self.fetch_students(request))
        return self._gallery

    def _settle_students(self, students: List[Student]) -> None:
        self.phase = LoadPhase.READY
        self._gallery = GalleryState(
            students=tuple(students),
            loading=False,
            current_page=1,
            page_size=self.default_page_size
        )

    @staticmethod
    def _parse_students(payload: Any) -> Optional[List[Student]]:
        if not isinstance(payload, list):
            return None
        try:
            return [Student.model_validate(item) for item in payload]
        except ValidationError as e:
            logger.warning(f"Aluno com formato inválido: {e}")
            return None

    # --- avaliação -------------------------------------------------------

    def select_student(self, student: Student) -> Optional[EvaluationRequest]:
        self._modal = ModalState(
            visible=True,
            selected_student=student,
            evaluation=None,
            evaluation_loading=True
        )
        self._pending_evaluation = None

        key = evaluation_cache_key(student.id)
        cached = self._read_cache(key, None)
        if cached:
            evaluation = self._parse_evaluation(cached)
            if evaluation is not None:
                self._modal = ModalState(
                    visible=True,
                    selected_student=student,
                    evaluation=evaluation,
                    evaluation_loading=False
                )
                return None
            logger.warning(f"Avaliação em cache inválida para {key}; buscando na API")

        self._pending_evaluation = EvaluationRequest(student_id=student.id)
        return self._pending_evaluation

    def fetch_evaluation(self, request: EvaluationRequest) -> EvaluationResponse:
        try:
            payload = self.api.get_evaluation(request.student_id)
        except NetworkFailure as e:
            return EvaluationResponse(student_id=request.student_id, error=e)
        return EvaluationResponse(student_id=request.student_id, payload=payload)

    def apply_evaluation(self, response: EvaluationResponse) -> bool:
        modal = self._modal
        if (not modal.visible
                or not modal.evaluation_loading
                or modal.selected_student is None
                or modal.selected_student.id != response.student_id):
            logger.debug(f"Resposta obsoleta descartada para o aluno {response.student_id}")
            return False

        self._pending_evaluation = None
        evaluation = None
        failed = not response.ok
        if response.ok and response.payload is not None:
            evaluation = self._parse_evaluation(response.payload)
            failed = evaluation is None

        if failed:
            logger.error(f"Falha ao buscar avaliação do aluno {response.student_id}: {response.error or 'formato inválido'}")
            self.notify_error(EVALUATION_ERROR_MESSAGE)
        elif evaluation is not None:
            self._write_cache(evaluation_cache_key(response.student_id), response.payload)
        else:
            logger.info(f"Aluno {response.student_id} sem avaliação")

        self._modal = ModalState(
            visible=True,
            selected_student=modal.selected_student,
            evaluation=evaluation,
            evaluation_loading=False
        )
        return True

    def open_evaluation(self, student: Student) -> ModalState:
        request = self.select_student(student)
        if request is not None:
            self.apply_evaluation(self.fetch_evaluation(request))
        return self._modal

    def close_modal(self) -> None:
        self._pending_evaluation = None
        self._modal = ModalState()

    @staticmethod
    def _parse_evaluation(payload: Any) -> Optional[Evaluation]:
        try:
            return Evaluation.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Avaliação com formato inválido: {e}")
            return None

    # --- paginação ---------------------------------------------------------

    def visible_page(self) -> List[Student]:
        gallery = self._gallery
        start = (gallery.current_page - 1) * gallery.page_size
        return list(gallery.students[start:start + gallery.page_size])

    def change_page(self, page: int, page_size: Optional[int] = None) -> None:
        size = self._gallery.page_size if page_size is None else page_size
        if page < 1:
            raise ValueError(f"Página inválida: {page}")
        if size < 0:
            raise ValueError(f"Tamanho de página inválido: {size}")

        self._gallery = GalleryState(
            students=self._gallery.students,
            loading=self._gallery.loading,
            current_page=page,
            page_size=size
        )

    # --- cache -------------------------------------------------------------

    def _read_cache(self, key: str, fallback: Any) -> Any:
        try:
            return self.cache.get(key, fallback)
        except CacheReadCorrupt as e:
            logger.warning(f"{e.message}; tratando como cache vazio")
            return fallback

    def _write_cache(self, key: str, value: Any) -> None:
        try:
            self.cache.set(key, value)
        except CacheWriteRejected as e:
            logger.warning(f"Escrita no cache ignorada: {e.message}")
