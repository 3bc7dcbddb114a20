import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from school_records.api.deps import get_db
from school_records.db.base import Base
from school_records.db.registry import init_db
from school_records.main import app

API = "/api/v1"


# Отдельная in-memory база на каждый тест
@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# Фикстуры для тестовых данных
@pytest.fixture
def department(client):
    resp = client.post(f"{API}/departments/", json={"name": "Math", "description": "Mathematics"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def teacher(client, department):
    resp = client.post(f"{API}/teachers/", json={
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@school.edu",
        "phone": "555-0100",
        "department_id": department["id"],
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def student(client):
    resp = client.post(f"{API}/students/", json={
        "first_name": "John",
        "last_name": "Smith",
        "email": "john.smith@school.edu",
        "date_of_birth": "2005-04-12",
        "enrollment_date": "2023-09-01",
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def course(client, department, teacher):
    resp = client.post(f"{API}/courses/", json={
        "name": "Calc I",
        "code": "MATH101",
        "description": "Differential calculus",
        "credits": 4,
        "department_id": department["id"],
        "teacher_id": teacher["id"],
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def homework(client, course):
    resp = client.post(f"{API}/homework/", json={
        "title": "Limits worksheet",
        "course_id": course["id"],
        "due_date": "2099-05-01T23:59:00Z",
        "max_score": 100,
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def exam(client, course):
    resp = client.post(f"{API}/exams/", json={
        "title": "Midterm",
        "course_id": course["id"],
        "exam_date": "2099-03-15T09:00:00+00:00",
        "duration": 90,
        "max_score": 100,
    })
    assert resp.status_code == 201
    return resp.json()
