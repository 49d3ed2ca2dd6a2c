from .student import Student, Evaluation
from .state import GalleryState, ModalState, LoadPhase
from .messages import (
    StudentsRequest,
    StudentsResponse,
    EvaluationRequest,
    EvaluationResponse,
)

__all__ = [
    'Student',
    'Evaluation',
    'GalleryState',
    'ModalState',
    'LoadPhase',
    'StudentsRequest',
    'StudentsResponse',
    'EvaluationRequest',
    'EvaluationResponse',
]
