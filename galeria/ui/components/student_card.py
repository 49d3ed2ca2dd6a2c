from typing import Callable, Sequence

import streamlit as st

from ...models import Student

GRID_COLUMNS = 5

PLACEHOLDER_PHOTO = """<svg xmlns="http://www.w3.org/2000/svg" width="220" height="220" viewBox="0 0 220 220">
<rect width="220" height="220" fill="#e9ecef"/>
<circle cx="110" cy="85" r="40" fill="#adb5bd"/>
<path d="M40 200c0-40 32-65 70-65s70 25 70 65z" fill="#adb5bd"/>
</svg>"""


def display_student_card(student: Student, on_select: Callable, controller) -> None:
    with st.container(border=True):
        st.image(student.photo or PLACEHOLDER_PHOTO, width=220)
        st.markdown(f"**{student.display_name}**")
        st.button(
            "Ver avaliação",
            key=f"aluno_{student.id}",
            on_click=on_select,
            args=(controller, student)
        )


def display_student_grid(students: Sequence[Student], on_select: Callable, controller) -> None:
    for row_start in range(0, len(students), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, student in zip(columns, students[row_start:row_start + GRID_COLUMNS]):
            with column:
                display_student_card(student, on_select, controller)
