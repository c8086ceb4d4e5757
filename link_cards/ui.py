import asyncio

import streamlit as st

from link_cards.client import FileStorage, GatewayClient, PreviewStore
from link_cards.config import configure_logging, get_settings


st.set_page_config(page_title="Link Preview", layout="centered")


def get_store() -> PreviewStore:
    """One store per browser session, loaded from local storage on first run."""
    if "store" not in st.session_state:
        configure_logging()
        settings = get_settings()
        st.session_state.store = PreviewStore.load(
            FileStorage(settings.storage_path),
            GatewayClient(settings.gateway_url, timeout=settings.request_timeout),
        )
    return st.session_state.store


@st.dialog("What's your name?")
def name_dialog(store: PreviewStore) -> None:
    name = st.text_input("Name", placeholder="Enter your name")
    if st.button("Submit"):
        store.submit_name(name)
        st.rerun()


@st.dialog("Edit Link Preview")
def edit_dialog(store: PreviewStore, index: int) -> None:
    preview = store.previews[index]
    with st.form(f"edit-form-{index}"):
        title = st.text_input("Title", value=preview.title)
        description = st.text_input("Description", value=preview.description)
        image = st.text_input("Image URL", value=preview.image)
        url = st.text_input("URL", value=preview.url)
        if st.form_submit_button("Save"):
            store.edit_preview(
                index, title=title, description=description, image=image, url=url
            )
            st.rerun()


def _fetch_preview(store: PreviewStore) -> None:
    # Runs as a button callback, so the URL widget can still be cleared here.
    store.url_input = st.session_state.url_input
    with st.spinner("Fetching preview..."):
        asyncio.run(store.add_preview())
    st.session_state.url_input = store.url_input


def _delete_preview(store: PreviewStore, index: int) -> None:
    store.delete_preview(index)


def render_preview(store: PreviewStore, index: int) -> None:
    preview = store.previews[index]
    with st.container(border=True):
        image_col, body_col = st.columns([1, 4])
        if preview.image:
            image_col.image(preview.image, width=96)
        body_col.subheader(preview.title or preview.url)
        if preview.description:
            body_col.write(preview.description)
        body_col.markdown(f"[{preview.url}]({preview.url})")

        edit_col, delete_col = st.columns([1, 1])
        if edit_col.button("Edit", key=f"edit-{index}"):
            edit_dialog(store, index)
        delete_col.button(
            "Delete",
            key=f"delete-{index}",
            type="primary",
            on_click=_delete_preview,
            args=(store, index),
        )


def main() -> None:
    store = get_store()
    st.title(store.greeting)

    if store.load_error is not None:
        st.warning("Saved previews could not be read, starting with an empty list.")

    if store.awaiting_name:
        name_dialog(store)
        return

    st.subheader("Add New Link Preview")
    url_col, button_col = st.columns([4, 1])
    url_col.text_input(
        "URL", key="url_input", placeholder="Enter URL", label_visibility="collapsed"
    )
    button_col.button(
        "Fetch Preview",
        on_click=_fetch_preview,
        args=(store,),
        disabled=store.busy,
    )
    if store.last_error:
        st.error(store.last_error)

    for index in range(len(store.previews)):
        render_preview(store, index)


main()
