import os
import tempfile

# point the app at a throwaway SQLite file before anything imports app.config
_TEST_DB = os.path.join(tempfile.mkdtemp(prefix="inventory-tests-"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB}"

import pytest

from app.db import SessionLocal, init_db


@pytest.fixture(autouse=True)
def fresh_db():
    # every test starts from empty tables
    init_db(reset=True)
    yield


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def scenario_csv():
    return (
        "name,unit,category,brand,stock,status,image\n"
        '"Widget","pcs","Tools","Acme",5,"","",\n'
        '"","pcs","Tools","Acme",3,"",""\n'
        '"Widget","pcs","Tools","Acme",2,"",""\n'
    )
