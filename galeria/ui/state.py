import streamlit as st

from ..config import Settings
from ..data import SessionCache, StudentApiClient
from ..services import GalleryController

CONTROLLER_KEY = "gallery_controller"
DIALOG_FLAG = "evaluation_dialog_open"
CACHE_NAMESPACE = "session_cache"


def notify_error(message: str) -> None:
    st.toast(message, icon="🚨")


def build_controller(settings: Settings) -> GalleryController:
    return GalleryController(
        api=StudentApiClient.from_settings(settings),
        cache=SessionCache.for_current_session(
            namespace=CACHE_NAMESPACE,
            quota_bytes=settings.SESSION_QUOTA_BYTES
        ),
        notify_error=notify_error,
        page_size=settings.PAGE_SIZE,
        page_size_options=settings.PAGE_SIZE_OPTIONS
    )


def init_session_state(settings: Settings) -> None:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = build_controller(settings)

    if DIALOG_FLAG not in st.session_state:
        st.session_state[DIALOG_FLAG] = False


def get_controller() -> GalleryController:
    return st.session_state[CONTROLLER_KEY]


def reset_session(settings: Settings) -> None:
    """Descarta o cache da sessão e recria o controlador (nova carga)."""
    get_controller().cache.clear()
    st.session_state[CONTROLLER_KEY] = build_controller(settings)
    st.session_state[DIALOG_FLAG] = False
