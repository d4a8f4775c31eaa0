import os
import tempfile

import pytest

# Must be set before anything in the package reads config
_test_db = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
_test_db.close()

os.environ["DB"] = f"sqlite:///{_test_db.name}"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-unit-tests-1234567890")
os.environ["SALT"] = "4"

from shortener import database  # noqa: E402


@pytest.fixture(autouse=True)
def clean_db():
    """Wipe the users table before each test so tests are independent."""
    database.init_db()
    db = database.get_session()
    db.query(database.DBUser).delete()
    db.commit()
    db.close()
    yield
