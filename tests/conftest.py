import pytest
from fasthtml.common import FastHTML
from starlette.testclient import TestClient

from counterapp import CounterViewModel
from counterapp.adapters.fasthtml import configure_app

class Recorder:
    """Listener that remembers every property name it was notified with."""

    def __init__(self):
        self.names = []

    def __call__(self, property_name):
        self.names.append(property_name)

@pytest.fixture
def recorder():
    return Recorder()

@pytest.fixture
def view_model():
    return CounterViewModel()

@pytest.fixture
def app(view_model):
    app = FastHTML(secret_key="testing")
    configure_app(app, app.route, view_model)
    return app

@pytest.fixture
def client(app):
    return TestClient(app)
