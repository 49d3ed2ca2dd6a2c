from .students import render_students_page

__all__ = [
    'render_students_page',
]
