import pytest

from dialectcss.session import StyleSession
from dialectcss.web.app import create_app

THEME = "聊天区域 {\n  宽度: 10像素\n}\n"


@pytest.fixture
def session():
    s = StyleSession()
    s.load(THEME)
    return s


@pytest.fixture
def app(session):
    app = create_app(session=session)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
