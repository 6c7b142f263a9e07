import pytest
from fastapi.testclient import TestClient

from wordwise.api.app import app

SIMPLE_TEXT = "The cat sat on the mat. It was a sunny day."
SHORT_SENTENCES_TEXT = "The cat is big. The dog is small. They are pets."
ACADEMIC_TEXT = "We need to analyze and evaluate the significant evidence to demonstrate our hypothesis."
COMPLEX_TEXT = (
    "Institutional epistemological considerations necessitate comprehensive interdisciplinary "
    "methodological reconceptualization of organizational communication infrastructure."
)
INFORMAL_TEXT = "This is really good stuff and we need to get a lot of help."


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
