"""
Configuración de pytest para tests
"""
import os

# Deshabilitar rate limiting antes de importar la app
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from petcare.logger import PetLogger, get_pet_logger
from petcare.store import PetStore, get_pet_store, utcnow


class InMemoryPetStore:
    """Store en memoria con la misma interfaz que PetStore"""

    is_valid_id = staticmethod(PetStore.is_valid_id)

    def __init__(self):
        self.docs: dict = {}
        self.calls: list = []

    async def create_one(self, fields):
        self.calls.append(("create_one", fields))
        now = utcnow()
        doc = {k: v for k, v in fields.items() if v is not None}
        doc["createdAt"] = now
        doc["updatedAt"] = now
        doc["_id"] = ObjectId()
        self.docs[doc["_id"]] = doc
        return dict(doc)

    async def find_many(self, skip, limit):
        self.calls.append(("find_many", skip, limit))
        ordered = sorted(self.docs.values(), key=lambda d: d["_id"])
        return [dict(d) for d in ordered[skip:skip + limit]]

    async def count_all(self):
        self.calls.append(("count_all",))
        return len(self.docs)

    async def find_by_id(self, pet_id):
        doc = self.docs.get(ObjectId(pet_id))
        return dict(doc) if doc else None

    async def replace_by_id(self, pet_id, fields):
        self.calls.append(("replace_by_id", pet_id, fields))
        old = self.docs.get(ObjectId(pet_id))
        if old is None:
            return None
        doc = {"_id": old["_id"], "createdAt": old["createdAt"]}
        doc.update({k: v for k, v in fields.items() if v is not None})
        doc["updatedAt"] = utcnow()
        self.docs[old["_id"]] = doc
        return dict(doc)

    async def merge_by_id(self, pet_id, fields):
        self.calls.append(("merge_by_id", pet_id, fields))
        doc = self.docs.get(ObjectId(pet_id))
        if doc is None:
            return None
        for key, value in fields.items():
            if value is None:
                doc.pop(key, None)
            else:
                doc[key] = value
        doc["updatedAt"] = utcnow()
        return dict(doc)

    async def delete_by_id(self, pet_id):
        return self.docs.pop(ObjectId(pet_id), None)


class RecordingPetLogger(PetLogger):
    """Guarda (nivel, mensaje, meta) además de escribir en logging"""

    def __init__(self):
        super().__init__("petcare.tests")
        self.events: list = []

    def _log(self, level, message, meta=None):
        self.events.append((level, message, meta))
        super()._log(level, message, meta)


@pytest.fixture
def store():
    return InMemoryPetStore()

@pytest.fixture
def pet_logger():
    return RecordingPetLogger()

@pytest.fixture
def app(store, pet_logger):
    from petcare.main import app
    app.dependency_overrides[get_pet_store] = lambda: store
    app.dependency_overrides[get_pet_logger] = lambda: pet_logger
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
def client(app):
    """Fixture para cliente de test de FastAPI"""
    return TestClient(app)

@pytest.fixture
def rex_data():
    """Datos de mascota de prueba"""
    return {
        "name": "Rex",
        "species": "dog",
        "breed": "Labrador",
        "age": 3,
        "owner": {"name": "Ana", "contact": "ana@example.com"},
    }
