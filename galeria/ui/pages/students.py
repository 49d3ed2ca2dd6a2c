import streamlit as st

from ...config import Settings
from ...models import LoadPhase
from ...services import GalleryController
from ..components import (
    display_pagination,
    display_student_grid,
    show_evaluation_dialog,
)
from ..state import DIALOG_FLAG


def render_students_page(controller: GalleryController, settings: Settings):
    st.title(settings.PROJECT_NAME)

    _ensure_students_loaded(controller)

    gallery = controller.gallery
    display_pagination(controller)

    if gallery.loading:
        st.info("Carregando alunos...")
        return

    if not gallery.students:
        if controller.phase is LoadPhase.FAILED:
            st.warning("Não foi possível carregar a lista de alunos.")
        else:
            st.info("Nenhum aluno encontrado.")
        return

    display_student_grid(controller.visible_page(), on_select=_open_evaluation, controller=controller)

    requested = st.session_state.get(DIALOG_FLAG, False)
    st.session_state[DIALOG_FLAG] = False
    if sync_dialog(controller, requested):
        show_evaluation_dialog(controller)


def sync_dialog(controller: GalleryController, requested: bool) -> bool:
    """Indica se o diálogo deve ser aberto nesta execução.

    Modal visível sem pedido de abertura significa que o usuário fechou o
    diálogo pelo X / Esc; o estado do controlador é fechado também.
    """
    if requested:
        return True
    if controller.modal.visible:
        controller.close_modal()
    return False


def _ensure_students_loaded(controller: GalleryController):
    request = controller.activate()
    if request is None:
        return

    with st.spinner("Carregando alunos..."):
        response = controller.fetch_students(request)
    controller.apply_students(response)


def _open_evaluation(controller: GalleryController, student):
    controller.select_student(student)
    st.session_state[DIALOG_FLAG] = True
