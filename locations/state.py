"""
Estado de la aplicación guardado en la sesión del usuario:
links rápidos y si ya se mostró la animación de carga inicial.
"""

from dataclasses import asdict, dataclass

from django.conf import settings

SESSION_KEY = 'routevm_state'


@dataclass
class AppState:
    share_url: str = ""
    custom_url: str = ""
    has_loaded_intro: bool = False

    def __post_init__(self):
        if not self.share_url:
            self.share_url = settings.DEFAULT_SHARE_URL
        if not self.custom_url:
            self.custom_url = settings.DEFAULT_CUSTOM_URL

    def to_dict(self):
        return {
            'shareUrl': self.share_url,
            'customUrl': self.custom_url,
            'hasLoadedIntro': self.has_loaded_intro,
        }


def load_state(session):
    data = session.get(SESSION_KEY) or {}
    return AppState(
        share_url=data.get('share_url', ""),
        custom_url=data.get('custom_url', ""),
        has_loaded_intro=bool(data.get('has_loaded_intro', False)),
    )


def save_state(session, state):
    session[SESSION_KEY] = asdict(state)


def update_quick_links(state, share_url, custom_url):
    """Valida y aplica los links rápidos; ValueError si alguno no es texto o queda vacío."""
    if not all(isinstance(url, (str, type(None))) for url in (share_url, custom_url)):
        raise ValueError("Los links deben ser texto.")
    share_url = (share_url or "").strip()
    custom_url = (custom_url or "").strip()
    if not share_url or not custom_url:
        raise ValueError("Los links no pueden estar vacíos.")
    state.share_url = share_url
    state.custom_url = custom_url
    return state
