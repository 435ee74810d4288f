"""
View state for the portfolio front-end.

The state is an immutable snapshot; every user intent or network result is an
event, and `reduce` computes the next snapshot without side effects.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple

PROFILES_SCREEN = 'profiles'
ADMIN_LOGIN_SCREEN = 'adminLogin'
MAIN_SCREEN = 'main'

PROFILE_NAMES = ('Resume', 'Projects', 'About', 'Contact')

WRONG_PASSWORD_ALERT = 'Wrong password'


class _AddProjectForm:
    def __repr__(self):
        return 'ADD_PROJECT'


# Stored in `selected_item` while the add-project form is open.
ADD_PROJECT = _AddProjectForm()


@dataclass(frozen=True)
class ViewState:
    screen: str = PROFILES_SCREEN
    active_profile: Optional[str] = None
    is_admin: bool = False
    projects: Tuple[dict, ...] = ()
    resume: Tuple[dict, ...] = ()
    selected_item: Any = None
    password: str = ''
    alert: Optional[str] = None

    @property
    def is_adding_project(self):
        return self.selected_item is ADD_PROJECT

    @property
    def detail_item(self):
        if self.selected_item is None or self.is_adding_project:
            return None
        return self.selected_item


# --- Events ---

@dataclass(frozen=True)
class ChooseProfile:
    profile: str

@dataclass(frozen=True)
class ManageProfiles:
    pass

@dataclass(frozen=True)
class PasswordChanged:
    value: str

@dataclass(frozen=True)
class LoginAccepted:
    pass

@dataclass(frozen=True)
class LoginRejected:
    pass

@dataclass(frozen=True)
class DismissAlert:
    pass

@dataclass(frozen=True)
class CancelLogin:
    pass

@dataclass(frozen=True)
class ClickLogo:
    pass

@dataclass(frozen=True)
class Logout:
    pass

@dataclass(frozen=True)
class ContentLoaded:
    projects: Tuple[dict, ...] = field(default_factory=tuple)
    resume: Tuple[dict, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class SelectItem:
    item: Any

@dataclass(frozen=True)
class OpenAddProject:
    pass

@dataclass(frozen=True)
class CloseModal:
    pass


# --- Transitions ---

def _choose_profile(state, event):
    if state.screen not in (PROFILES_SCREEN, MAIN_SCREEN):
        return state
    if event.profile not in PROFILE_NAMES:
        return state
    return replace(state, screen=MAIN_SCREEN, active_profile=event.profile)


def _manage_profiles(state, event):
    if state.screen != PROFILES_SCREEN:
        return state
    # The login form is only ever shown to a visitor who is not admin yet.
    if state.is_admin:
        return replace(state, screen=MAIN_SCREEN)
    return replace(state, screen=ADMIN_LOGIN_SCREEN)


def _password_changed(state, event):
    if state.screen != ADMIN_LOGIN_SCREEN:
        return state
    return replace(state, password=event.value)


def _login_accepted(state, event):
    if state.screen != ADMIN_LOGIN_SCREEN:
        return state
    return replace(state, screen=MAIN_SCREEN, is_admin=True, password='', alert=None)


def _login_rejected(state, event):
    if state.screen != ADMIN_LOGIN_SCREEN:
        return state
    return replace(state, alert=WRONG_PASSWORD_ALERT)


def _dismiss_alert(state, event):
    return replace(state, alert=None)


def _cancel_login(state, event):
    if state.screen != ADMIN_LOGIN_SCREEN:
        return state
    return replace(state, screen=PROFILES_SCREEN, alert=None)


def _click_logo(state, event):
    if state.screen != MAIN_SCREEN:
        return state
    return replace(state, screen=PROFILES_SCREEN)


def _logout(state, event):
    if state.screen != MAIN_SCREEN:
        return state
    return replace(state, is_admin=False)


def _content_loaded(state, event):
    return replace(state, projects=tuple(event.projects), resume=tuple(event.resume))


def _select_item(state, event):
    if state.screen != MAIN_SCREEN:
        return state
    return replace(state, selected_item=event.item)


def _open_add_project(state, event):
    if state.screen != MAIN_SCREEN or not state.is_admin:
        return state
    return replace(state, selected_item=ADD_PROJECT)


def _close_modal(state, event):
    return replace(state, selected_item=None)


_TRANSITIONS = {
    ChooseProfile: _choose_profile,
    ManageProfiles: _manage_profiles,
    PasswordChanged: _password_changed,
    LoginAccepted: _login_accepted,
    LoginRejected: _login_rejected,
    DismissAlert: _dismiss_alert,
    CancelLogin: _cancel_login,
    ClickLogo: _click_logo,
    Logout: _logout,
    ContentLoaded: _content_loaded,
    SelectItem: _select_item,
    OpenAddProject: _open_add_project,
    CloseModal: _close_modal,
}


def reduce(state: ViewState, event) -> ViewState:
    """Return the state that follows `event`; inapplicable events change nothing."""
    transition = _TRANSITIONS.get(type(event))
    if transition is None:
        raise TypeError(f"Unknown view event: {event!r}")
    return transition(state, event)
