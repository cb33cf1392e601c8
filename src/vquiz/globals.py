from pathlib import Path

from fastapi.templating import Jinja2Templates

from .session import SessionStore

PACKAGE_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))
session_store = SessionStore()
