"""Sign-in page backed by the demo auth stub."""

from nicegui import app, ui

from nexchat.auth import AuthError, User, authenticate, register
from nexchat.ui.components import CUSTOM_CSS


def _sign_in(user: User) -> None:
    app.storage.user["user"] = user.model_dump()
    ui.navigate.to("/")


@ui.page("/login")
def login_page() -> None:
    """Login and sign-up forms."""
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode().bind_value(app.storage.user, "dark_mode")

    with ui.card().classes("absolute-center w-96 p-6 gap-4"):
        ui.label("NexG AI").classes("text-2xl font-semibold")
        with ui.tabs().classes("w-full") as tabs:
            login_tab = ui.tab("Sign in")
            signup_tab = ui.tab("Sign up")

        with ui.tab_panels(tabs, value=login_tab).classes("w-full"):
            with ui.tab_panel(login_tab).classes("gap-3"):
                login_email = ui.input("Email").classes("w-full")
                login_password = ui.input("Password", password=True).classes("w-full")

                def do_login() -> None:
                    try:
                        user = authenticate(login_email.value or "", login_password.value or "")
                    except AuthError as e:
                        ui.notify(str(e), type="negative")
                        return
                    _sign_in(user)

                ui.button("Sign in", on_click=do_login).classes("w-full")
                ui.label("Demo account: test@example.com / password").classes(
                    "text-xs text-gray-400"
                )

            with ui.tab_panel(signup_tab).classes("gap-3"):
                name = ui.input("Name").classes("w-full")
                signup_email = ui.input("Email").classes("w-full")
                signup_password = ui.input("Password", password=True).classes("w-full")

                def do_register() -> None:
                    try:
                        user = register(
                            name.value or "", signup_email.value or "", signup_password.value or ""
                        )
                    except AuthError as e:
                        ui.notify(str(e), type="negative")
                        return
                    _sign_in(user)

                ui.button("Create account", on_click=do_register).classes("w-full")
