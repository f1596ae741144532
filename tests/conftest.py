"""Pytest configuration and shared fixtures."""

import json

import pytest

from suffix_complete import SuffixCompleter


@pytest.fixture
def email_suffixes():
    """
    A small ordered list of e-mail suffixes.

    Returns:
        list[str]: Candidate suffixes, most preferred first
    """
    return ["@gmail.com", "@yahoo.com", "@example.com"]


@pytest.fixture
def email_completer(email_suffixes):
    """
    Create a case-insensitive completer over the sample e-mail suffixes.

    Returns:
        SuffixCompleter: A completer with the default ignore_case=True
    """
    return SuffixCompleter(email_suffixes)


@pytest.fixture
def candidate_file(tmp_path):
    """
    Write a candidate file that load_candidates() can read.

    Returns:
        Path: Path to a JSON file holding a list of suffixes
    """
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps(["@example.org", "@example.net"]), encoding="utf-8")
    return path
