import glob
import os

import pytest

from gltfcheck.utils.loader import load_document
from gltfcheck.validation import validate_gltf


def _list_corpus_documents():
    return sorted(glob.glob(os.path.join(os.path.dirname(__file__), "corpus", "*.gltf")))


@pytest.mark.parametrize("document_path", _list_corpus_documents() or ["__NO_DOCUMENTS__"])
def test_corpus_documents_validate_cleanly(document_path):
    if document_path == "__NO_DOCUMENTS__":
        pytest.skip("No corpus documents found in tests/corpus/. Add .gltf files to run this test.")

    gltf = load_document(document_path)
    result = validate_gltf(gltf)
    if len(result):
        readable = "; ".join(str(i) for i in result.issues[:10])
        pytest.fail(f"Document has findings ({document_path}): {readable}")


@pytest.mark.parametrize("document_path", _list_corpus_documents())
def test_corpus_documents_are_deterministic(document_path):
    gltf = load_document(document_path)
    assert validate_gltf(gltf) == validate_gltf(gltf)
