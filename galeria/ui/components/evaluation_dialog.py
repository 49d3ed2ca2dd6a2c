import streamlit as st

from ...services import GalleryController


def show_evaluation_dialog(controller: GalleryController) -> None:
    student = controller.modal.selected_student
    name = student.display_name if student else ""
    st.dialog(f"Avaliação de {name}", width="large")(_render_evaluation)(controller)


def _render_evaluation(controller: GalleryController):
    request = controller.pending_evaluation
    if controller.modal.evaluation_loading and request is not None:
        with st.spinner("Carregando avaliação..."):
            response = controller.fetch_evaluation(request)
        controller.apply_evaluation(response)

    modal = controller.modal
    if modal.evaluation_loading:
        st.info("Carregando avaliação...")
    elif modal.evaluation is not None:
        evaluation = modal.evaluation
        st.markdown(f"**Nota:** {evaluation.nota}")
        st.markdown(f"**Professor:** {evaluation.professor}")
        st.markdown(f"**Matéria:** {evaluation.materia}")
        st.markdown(f"**Sala:** {evaluation.sala}")
    else:
        st.markdown(
            "<p style='text-align: center'>Avaliação não encontrada.</p>",
            unsafe_allow_html=True
        )

    if st.button("Fechar", key="close_evaluation"):
        controller.close_modal()
        st.rerun()
