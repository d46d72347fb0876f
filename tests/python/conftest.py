import pytest

from trecparse.core.loggers import reset_level


# loggers keep the level they were created with; make sure every test starts from
# the default so that log assertions are not affected by the order tests run in
@pytest.fixture(autouse=True)
def reset_trecparse_log_level():
    yield
    reset_level("WARNING")
