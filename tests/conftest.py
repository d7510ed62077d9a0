import os

os.environ.setdefault("DATABASE_URI", "sqlite://")

from datetime import time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pharmacy_locator.db import Base
from pharmacy_locator.dependencies import get_db
from pharmacy_locator.main import app
from pharmacy_locator.models import City, Drug, Drugstore, DrugstoreDrug, DrugstoreWorkDay


# ═══════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def session_factory():
    """In-memory database shared by every connection of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_db(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def add_work_days(db, drugstore_id, weekdays, time_start, time_end):
    db.add_all([
        DrugstoreWorkDay(drugstore_id=drugstore_id, work_day=day, time_start=time_start, time_end=time_end)
        for day in weekdays
    ])


@pytest.fixture
def sample_data(test_db):
    """
    Three drugstores:
      1 - Central Pharmacy, weekdays 08:00-18:00 and saturday 09:00-14:00
      2 - Green Cross, monday/wednesday/friday 09:00-17:00
      3 - Night Drugs, every day 00:00-23:59
    """
    test_db.add(City(id=1, name="Dushanbe"))
    test_db.add_all([
        Drugstore(drugstore_id=1, drugstore_name="Central Pharmacy", address="Rudaki Avenue 10",
                  city_id=1, latitude=38.56, longitude=68.78, phone_number="+992900000001",
                  email="central@example.com", drugstore_photo_path="central"),
        Drugstore(drugstore_id=2, drugstore_name="Green Cross", address="Somoni Street 5",
                  city_id=1, phone_number="+992900000002"),
        Drugstore(drugstore_id=3, drugstore_name="Night Drugs", address="Central Square 1"),
    ])
    test_db.add_all([
        Drug(id=1, name="Paracetamol", description="Painkiller", country="India"),
        Drug(id=2, name="Ibuprofen", description="Anti-inflammatory", country="Germany"),
        Drug(id=3, name="Aspirin", description=None, country="France"),
    ])
    test_db.flush()

    add_work_days(test_db, 1, ['MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY'], time(8, 0), time(18, 0))
    add_work_days(test_db, 1, ['SATURDAY'], time(9, 0), time(14, 0))
    add_work_days(test_db, 2, ['MONDAY', 'WEDNESDAY', 'FRIDAY'], time(9, 0), time(17, 0))
    add_work_days(test_db, 3, ['MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY', 'SATURDAY', 'SUNDAY'],
                  time(0, 0), time(23, 59, 59))

    test_db.add_all([
        DrugstoreDrug(drugstore_id=1, drug_id=1, price=10.0, existence=True),
        DrugstoreDrug(drugstore_id=1, drug_id=2, price=25.0, existence=True),
        DrugstoreDrug(drugstore_id=2, drug_id=1, price=8.0, existence=True),
        DrugstoreDrug(drugstore_id=2, drug_id=2, price=20.0, existence=False),
        DrugstoreDrug(drugstore_id=3, drug_id=1, price=12.0, existence=True),
    ])
    test_db.commit()
    return test_db
