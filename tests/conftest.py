import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from ewaste_api.main import app
from ewaste_api.db.session import get_session
from ewaste_api.db.base import *  # noqa: F401,F403
from ewaste_api.api.v1.endpoints.requests import get_email_dispatcher
from ewaste_api.api.v1.endpoints.users import limiter
from ewaste_api.api.v1.endpoints.disposals import get_upload_storage
from ewaste_api.core.security import get_password_hash
from ewaste_api.models.listing import Listing
from ewaste_api.models.user import User
from ewaste_api.services.email_service import (
    DeliveryResult,
    DeliveryStatus,
    EmailDispatcher,
    EmailProvider,
)
from ewaste_api.services.upload_service import UploadStorage


class RecordingEmailProvider(EmailProvider):
    """Keeps every message instead of sending it."""

    def __init__(self, fail: bool = False):
        self.sent = []
        self.fail = fail

    @property
    def provider_name(self) -> str:
        return "recording"

    def is_configured(self) -> bool:
        return True

    def send(self, message):
        self.sent.append(message)
        if self.fail:
            raise ConnectionError("SMTP server unreachable")
        return DeliveryResult(success=True, status=DeliveryStatus.SENT, provider=self.provider_name)


@pytest.fixture(name="session")
def session_fixture():
    """Create a test database session."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="email_provider")
def email_provider_fixture():
    return RecordingEmailProvider()


@pytest.fixture(name="dispatcher")
def dispatcher_fixture(email_provider: RecordingEmailProvider):
    dispatcher = EmailDispatcher(email_provider, max_workers=1)
    yield dispatcher
    dispatcher.shutdown(wait=True)


@pytest.fixture(name="client")
def client_fixture(session: Session, dispatcher: EmailDispatcher, tmp_path):
    """Create a test client with database, email and upload overrides."""
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_email_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_upload_storage] = lambda: UploadStorage(str(tmp_path / "uploads"))
    limiter.enabled = False
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture(name="listing")
def listing_fixture(session: Session):
    """Create a listing to request against."""
    listing = Listing(
        item_name="Old laptop",
        description="ThinkPad T420, no battery",
        contact="555-0100",
    )
    session.add(listing)
    session.commit()
    session.refresh(listing)
    return listing


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session):
    """Create a test user."""
    user = User(
        name="Test User",
        email="test@example.com",
        password_hash=get_password_hash("testpassword")
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="failing_email_provider")
def failing_email_provider_fixture():
    return RecordingEmailProvider(fail=True)
