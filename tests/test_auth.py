import base64
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.auth import MOCK_USER, AuthService


def test_any_credentials_sign_in_as_demo_user():
    auth = AuthService()
    session = auth.authorize("someone@example.com", "secret")
    assert session is not None
    assert session.user_id == MOCK_USER["id"]
    assert session.name == "John Doe"
    assert auth.is_authenticated


def test_access_token_encodes_email():
    session = AuthService().authorize("someone@example.com", "secret")
    encoded = session.access_token[len("mock_access_token_"):]
    assert base64.b64decode(encoded).decode("utf-8") == "someone@example.com"
    assert session.refresh_token.startswith("mock_refresh_token_")
    assert session.refresh_token[len("mock_refresh_token_"):].isdigit()


def test_blank_credentials_are_rejected():
    auth = AuthService()
    assert auth.authorize("", "secret") is None
    assert auth.authorize("a@b.c", "   ") is None
    assert auth.authorize(None, None) is None
    assert not auth.is_authenticated


def test_sign_out_clears_session():
    auth = AuthService()
    auth.authorize("a@b.c", "pw")
    auth.sign_out()
    assert auth.current is None
