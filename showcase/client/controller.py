import logging

import requests

from . import state as view
from .api import PortfolioClient

logger = logging.getLogger(__name__)


class ClientController:
    """
    Owns the current `ViewState` and performs the HTTP calls behind user intents.

    Listeners registered with `subscribe` are called with the new state after
    every dispatch. Writes are always followed by a full re-fetch of both
    lists; only a rejected login is reported to the user.
    """

    def __init__(self, api=None, initial_state=None):
        self.api = api or PortfolioClient()
        self.state = initial_state or view.ViewState()
        self._listeners = []

    def subscribe(self, listener):
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, event):
        self.state = view.reduce(self.state, event)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    # --- Loading ---

    def mount(self):
        self.refresh()

    def refresh(self):
        try:
            projects = self.api.list_projects()
            resume = self.api.list_resume()
        except requests.RequestException as e:
            logger.warning(f"Could not load portfolio content: {e}")
            return self.state
        return self.dispatch(view.ContentLoaded(projects=projects, resume=resume))

    def _enter_main(self, event):
        was_main = self.state.screen == view.MAIN_SCREEN
        self.dispatch(event)
        if self.state.screen == view.MAIN_SCREEN and not was_main:
            self.refresh()
        return self.state

    # --- Navigation ---

    def choose_profile(self, profile):
        return self._enter_main(view.ChooseProfile(profile))

    def manage_profiles(self):
        return self._enter_main(view.ManageProfiles())

    def cancel_login(self):
        return self.dispatch(view.CancelLogin())

    def click_logo(self):
        return self.dispatch(view.ClickLogo())

    def logout(self):
        return self.dispatch(view.Logout())

    # --- Admin login ---

    def set_password(self, value):
        return self.dispatch(view.PasswordChanged(value))

    def submit_login(self, password=None):
        if password is not None:
            self.set_password(password)
        if self.state.screen != view.ADMIN_LOGIN_SCREEN:
            return self.state

        try:
            token = self.api.login(self.state.password)
        except requests.RequestException as e:
            logger.warning(f"Admin login request failed: {e}")
            token = None

        if token is None:
            return self.dispatch(view.LoginRejected())
        return self._enter_main(view.LoginAccepted())

    def dismiss_alert(self):
        return self.dispatch(view.DismissAlert())

    # --- Modals ---

    def select_item(self, item):
        return self.dispatch(view.SelectItem(item))

    def open_add_project(self):
        return self.dispatch(view.OpenAddProject())

    def close_modal(self):
        return self.dispatch(view.CloseModal())

    # --- Content edits ---

    def add_project(self, fields):
        try:
            self.api.create_project(fields)
        except requests.RequestException as e:
            logger.warning(f"Could not add project: {e}")
        self.refresh()
        return self.close_modal()

    def delete_project(self, project_id):
        try:
            self.api.delete_project(project_id)
        except requests.RequestException as e:
            logger.warning(f"Could not delete project {project_id}: {e}")
        self.refresh()
        return self.close_modal()

    def delete_resume(self, entry_id):
        try:
            self.api.delete_resume_entry(entry_id)
        except requests.RequestException as e:
            logger.warning(f"Could not delete resume entry {entry_id}: {e}")
        self.refresh()
        return self.close_modal()
