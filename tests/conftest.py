import base64

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from courses_api.core.config import Settings
from courses_api.main import create_app

ANN = {
    'firstName': 'Ann',
    'lastName': 'Lee',
    'emailAddress': 'ann@x.com',
    'password': 'secret1',
}
BOB = {
    'firstName': 'Bob',
    'lastName': 'Ray',
    'emailAddress': 'bob@x.com',
    'password': 'hunter22',
}


def basic_auth_header(email: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f'{email}:{password}'.encode('utf-8')).decode('ascii')
    return {'Authorization': f'Basic {token}'}


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / 'courses_api_test.db'


@pytest.fixture
def app(db_path):
    settings = Settings(
        database_url=f'sqlite+aiosqlite:///{db_path}',
        bcrypt_rounds=4,
        log_level='WARNING',
    )
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sync_engine(client, db_path):
    # depends on client so the schema exists before tests read it
    engine = create_engine(f'sqlite:///{db_path}')
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def ann(client) -> dict[str, str]:
    response = client.post('/api/users', json=ANN)
    assert response.status_code == 201
    return basic_auth_header(ANN['emailAddress'], ANN['password'])


@pytest.fixture
def bob(client) -> dict[str, str]:
    response = client.post('/api/users', json=BOB)
    assert response.status_code == 201
    return basic_auth_header(BOB['emailAddress'], BOB['password'])


@pytest.fixture
def basic_auth():
    return basic_auth_header


@pytest.fixture
def ann_payload() -> dict[str, str]:
    return dict(ANN)
