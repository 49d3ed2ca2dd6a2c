import streamlit as st

from ..config import load_settings
from ..utils import ConfigError, get_logger, set_log_level
from .state import init_session_state, get_controller, reset_session
from .pages import render_students_page

logger = get_logger(__name__)


def run_app():
    # Configuração inicial
    try:
        settings = load_settings()
    except ConfigError as e:
        st.set_page_config(page_title="Lista de Alunos", layout="wide")
        logger.error(e.message)
        st.error(f"{e.message}. Defina API_URL e API_KEY no ambiente ou no arquivo .env.")
        return

    st.set_page_config(**settings.page_config)
    st.markdown(settings.hide_streamlit_style, unsafe_allow_html=True)
    set_log_level(settings.LOG_LEVEL)
    init_session_state(settings)

    with st.sidebar:
        st.button(
            "Recarregar dados",
            on_click=reset_session,
            args=(settings,),
            help="Limpa o cache desta sessão e busca os alunos novamente"
        )

    render_students_page(get_controller(), settings)


if __name__ == "__main__":
    run_app()
