from dataclasses import replace

import streamlit as st

from ...models import GalleryState
from ...services import GalleryController


def clamp_page(gallery: GalleryState, page_size: int) -> int:
    """Página atual limitada ao total de páginas com o novo tamanho."""
    last_page = max(replace(gallery, page_size=page_size).page_count, 1)
    return min(gallery.current_page, last_page)


def display_pagination(controller: GalleryController) -> None:
    gallery = controller.gallery
    options = list(controller.page_size_options)
    if gallery.page_size and gallery.page_size not in options:
        options = sorted(options + [gallery.page_size])

    col1, col2, col3 = st.columns([1, 1, 3])
    with col1:
        page_size = st.selectbox(
            "Alunos por página",
            options=options,
            index=options.index(gallery.page_size) if gallery.page_size in options else 0,
            disabled=gallery.loading
        )
    with col2:
        last_page = max(gallery.page_count, 1)
        page = st.number_input(
            "Página",
            min_value=1,
            max_value=last_page,
            value=min(gallery.current_page, last_page),
            step=1,
            disabled=gallery.loading
        )
    with col3:
        st.caption(f"{gallery.total} alunos · página {min(gallery.current_page, last_page)} de {last_page}")

    if gallery.loading:
        return

    if page_size != gallery.page_size:
        controller.change_page(clamp_page(gallery, page_size), page_size)
    elif int(page) != gallery.current_page:
        controller.change_page(int(page))
