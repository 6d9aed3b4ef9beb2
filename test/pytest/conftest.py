# test/pytest/conftest.py
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.deps import get_assignment_repo, get_submission_repo, get_testimonial_repo
from app.database.assignment_repo import AssignmentRepo
from app.database.mongo_utils import from_doc
from app.database.submission_repo import SubmissionRepo
from app.database.testimonial_repo import TestimonialRepo
from app.main import create_app
from app.schemas.assignment import Assignment
from app.schemas.common import UpsertResult
from app.schemas.submission import Submission
from app.schemas.testimonial import Testimonial


# ------------------------- Fake repositories -------------------------
class _FakeStore:
    def __init__(self):
        self.items: dict[str, dict] = {}
        self.calls: list[str] = []

    def _read(self, model, item_id: str):
        return from_doc(model, {**self.items[item_id], "_id": ObjectId(item_id)})

    def _insert(self, doc: dict) -> str:
        new_id = str(ObjectId())
        self.items[new_id] = dict(doc)
        return new_id

    def _upsert(self, item_id: str, fields: dict, on_insert: dict) -> UpsertResult:
        current = self.items.get(item_id)
        if current is None:
            self.items[item_id] = {**on_insert, **fields}
            return UpsertResult(matchedCount=0, modifiedCount=0, upsertedId=item_id)
        changed = any(current.get(k) != v for k, v in fields.items())
        current.update(fields)
        return UpsertResult(matchedCount=1, modifiedCount=int(changed))


class FakeAssignmentRepo(_FakeStore, AssignmentRepo):
    def _model(self, item_id: str) -> Assignment:
        return self._read(Assignment, item_id)

    async def list_all(self):
        self.calls.append("list_all")
        return [self._model(i) for i in self.items]

    async def find_one(self, assignment_id: str):
        self.calls.append("find_one")
        return self._model(assignment_id) if assignment_id in self.items else None

    async def create(self, doc: dict) -> str:
        self.calls.append("create")
        return self._insert(doc)

    async def upsert(self, assignment_id: str, fields: dict, on_insert: dict):
        self.calls.append("upsert")
        return self._upsert(assignment_id, fields, on_insert)

    async def delete(self, assignment_id: str) -> bool:
        self.calls.append("delete")
        return self.items.pop(assignment_id, None) is not None


class FakeSubmissionRepo(_FakeStore, SubmissionRepo):
    def _model(self, item_id: str) -> Submission:
        return self._read(Submission, item_id)

    def _where(self, pred):
        return [self._model(i) for i, d in self.items.items() if pred(d)]

    async def find_by_submitter(self, email: str):
        self.calls.append("find_by_submitter")
        return self._where(lambda d: d.get("user_email") == email)

    async def find_pending_excluding(self, email: str):
        self.calls.append("find_pending_excluding")
        return self._where(lambda d: d.get("status") == "Pending" and d.get("user_email") != email)

    async def find_by_assignment(self, assignment_id: str):
        self.calls.append("find_by_assignment")
        return self._where(lambda d: d.get("assignment_id") == assignment_id)

    async def find_one(self, submission_id: str):
        self.calls.append("find_one")
        return self._model(submission_id) if submission_id in self.items else None

    async def create(self, doc: dict) -> str:
        self.calls.append("create")
        return self._insert(doc)

    async def upsert(self, submission_id: str, fields: dict):
        self.calls.append("upsert")
        return self._upsert(submission_id, fields, {})


class FakeTestimonialRepo(_FakeStore, TestimonialRepo):
    async def list_all(self):
        self.calls.append("list_all")
        return [self._read(Testimonial, i) for i in self.items]

    async def create(self, doc: dict) -> str:
        self.calls.append("create")
        return self._insert(doc)


# ------------------------------- Fixtures -------------------------------------
@pytest.fixture
def assignment_repo():
    return FakeAssignmentRepo()


@pytest.fixture
def submission_repo():
    return FakeSubmissionRepo()


@pytest.fixture
def fake_testimonial_repo():
    return FakeTestimonialRepo()


@pytest.fixture
def settings():
    return Settings(access_token_secret="test-secret", environment="development")


@pytest.fixture
def app(settings, assignment_repo, submission_repo, fake_testimonial_repo):
    # lifespan is never entered: no MongoDB needed
    app = create_app(settings)
    app.dependency_overrides[get_assignment_repo] = lambda: assignment_repo
    app.dependency_overrides[get_submission_repo] = lambda: submission_repo
    app.dependency_overrides[get_testimonial_repo] = lambda: fake_testimonial_repo
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_service(app):
    return app.state.auth_service


@pytest.fixture
def bearer(auth_service):
    def _bearer(email: str) -> dict:
        return {"Authorization": f"Bearer {auth_service.issue_token(email)}"}
    return _bearer
