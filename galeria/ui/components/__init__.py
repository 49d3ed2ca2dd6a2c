from .student_card import display_student_card, display_student_grid
from .pagination import display_pagination
from .evaluation_dialog import show_evaluation_dialog

__all__ = [
    'display_student_card',
    'display_student_grid',
    'display_pagination',
    'show_evaluation_dialog',
]
