import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from db.models import init_db


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'tracker.db'}")
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()
