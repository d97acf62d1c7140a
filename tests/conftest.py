import os
import pytest
from httpx import ASGITransport, AsyncClient

os.environ["TESTING"] = "1"
os.environ.setdefault("CLOUDJOBS_SECRET", "test-signing-secret-0123456789abcdef")
os.environ.setdefault("CLOUDJOBS_PROCESSOR_HOST", "https://jobs.example.com")
os.environ.setdefault("CLOUDJOBS_GCP_PROJECT_ID", "test-project")
os.environ.setdefault("CLOUDJOBS_GCP_LOCATION_ID", "europe-west1")
os.environ.setdefault("CLOUDJOBS_GCP_QUEUE_ID", "test-queue")

from cloudjobs.config import configure
from cloudjobs.main import app as fastapi_app
from cloudjobs.queue_client import get_client

import sample_workers


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_state():
    configure()
    get_client().clear()
    sample_workers.reset()
    yield


@pytest.fixture
def queue():
    return get_client()


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://testserver") as ac:
        yield ac
