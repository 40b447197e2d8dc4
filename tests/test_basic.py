"""Basic end-to-end tests for docseek."""

import pytest

from docseek import DocsetSearcher, find_docset, normalize_query


def test_end_to_end_search(docsets_dir, sample_docset):
    """Find a docset by name and search it."""
    docset = find_docset(docsets_dir, "NodeJS")
    result = DocsetSearcher().search(docset, normalize_query(["readf"]))

    # Assertions
    assert len(result) == 1
    top = result.candidates[0]
    assert top.name == "readFile"
    assert top.kind == "function"
    assert top.resolved_path.name == "readFile.html"
    assert top.resolved_path.parent.parent == sample_docset.documents_dir


def test_normalize_query():
    assert normalize_query([]) == ""
    assert normalize_query(["open", "file"]) == "open file"
    assert normalize_query(["  spaced "]) == "  spaced "
    assert normalize_query("already joined") == "already joined"


def test_version():
    """Test version is set."""
    from docseek import __version__

    assert __version__ == "0.1.0"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
