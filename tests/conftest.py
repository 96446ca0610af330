from decimal import Decimal
from types import SimpleNamespace

import pytest

from config import TestingConfig
from genai_service import TextGenerator
from ledger import Ledger
from models import FareClass, FareClassName, Train
from seed_data import demo_trains
from server import create_app


def make_train(train_id="T001", source="DELHI", destination="MUMBAI", economy=(800, 200, 150), **kwargs):
    plans = {
        FareClassName.FIRST:    (3500, 50, 45),
        FareClassName.BUSINESS: (2000, 100, 90),
        FareClassName.ECONOMY:  economy,
    }
    return Train(
        id=train_id,
        train_name=kwargs.get("train_name", "Capital Express"),
        train_number=kwargs.get("train_number", "12051"),
        source=source,
        destination=destination,
        departure=kwargs.get("departure", "08:00"),
        description=kwargs.get("description"),
        classes={name: FareClass(Decimal(p), t, a) for name, (p, t, a) in plans.items()},
    )


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error    = error
        self.calls    = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return self.response


def fake_client(text="", chunks=None, error=None):
    metadata  = SimpleNamespace(grounding_chunks=chunks)
    candidate = SimpleNamespace(grounding_metadata=metadata)
    response  = SimpleNamespace(text=text, candidates=[candidate])
    return SimpleNamespace(models=FakeModels(response=response, error=error))


@pytest.fixture
def ledger():
    return Ledger([make_train()])


@pytest.fixture
def seeded_ledger():
    return Ledger(demo_trains())


@pytest.fixture
def generator():
    client = fake_client(text="  Ride in style.  ")
    return TextGenerator(client=client)


@pytest.fixture
def app(seeded_ledger, generator):
    return create_app(TestingConfig, ledger=seeded_ledger, generator=generator)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_client(client):
    resp = client.post('/login', json={"email": "rider@example.com", "password": "pw", "role": "user"})
    assert resp.status_code == 200
    return client


@pytest.fixture
def admin_client(app):
    c = app.test_client()
    resp = c.post('/login', json={"email": "admin@moveo.com", "password": "admin123", "role": "admin"})
    assert resp.status_code == 200
    return c
