import os

# must be set before course_booking.core.config is imported
TEST_DB_FILE = "test_course_booking.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from course_booking.core.deps import get_db  # noqa: E402
from course_booking.core.security import hash_password  # noqa: E402
from course_booking.db.base import Base  # noqa: E402
from course_booking.main import app  # noqa: E402
from course_booking.models.course import Course  # noqa: E402
from course_booking.models.enrollment import EnrolledCourse, Enrollment  # noqa: E402
from course_booking.models.news import News  # noqa: E402
from course_booking.models.user import User  # noqa: E402

ADMIN_EMAIL = "admin@mail.com"
ADMIN_PASSWORD = "admin1234"
STUDENT_EMAIL = "student@mail.com"
STUDENT_PASSWORD = "student123"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """Seed a clean minimal dataset for each test and hand back the ids."""
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(EnrolledCourse).delete()
        db.query(Enrollment).delete()
        db.query(News).delete()
        db.query(Course).delete()
        db.query(User).delete()
        db.commit()

        admin = User(
            first_name="Ada",
            last_name="Admin",
            email=ADMIN_EMAIL,
            mobile_no="09171234567",
            password=hash_password(ADMIN_PASSWORD),
            is_admin=True,
        )
        student = User(
            first_name="Sam",
            last_name="Student",
            email=STUDENT_EMAIL,
            mobile_no="09177654321",
            password=hash_password(STUDENT_PASSWORD),
        )
        db.add_all([admin, student])

        python = Course(name="Python 101", description="Intro to Python", price=100)
        java = Course(name="Java 201", description="Objects all the way", price=250)
        archived = Course(
            name="COBOL Basics", description="Retired", price=50, is_active=False
        )
        db.add_all([python, java, archived])
        db.commit()

        ids = {
            "admin": admin.id,
            "student": student.id,
            "python": python.id,
            "java": java.id,
            "archived": archived.id,
        }
        yield ids
    finally:
        db.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def login(client, email: str, password: str) -> str:
    r = client.post("/users/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["access"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(client):
    return auth_header(login(client, ADMIN_EMAIL, ADMIN_PASSWORD))


@pytest.fixture()
def student_headers(client):
    return auth_header(login(client, STUDENT_EMAIL, STUDENT_PASSWORD))
