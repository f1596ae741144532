"""Tests for completion value objects."""

import pytest
from pydantic import ValidationError

from suffix_complete.types import Completion, CompletionList, TextChanged


def _completion(
    text="john@example.com", typed_text="john@ex", candidate="@example.com", overlap=3
):
    return Completion(text=text, typed_text=typed_text, candidate=candidate, overlap=overlap)


class TestCompletion:
    """Test the Completion value object."""

    def test_remainder(self):
        """Test that the remainder is the text after the typed prefix."""
        assert _completion().remainder == "ample.com"
        assert not _completion().is_exact

    def test_frozen(self):
        """Test that completions are immutable."""
        completion = _completion()
        with pytest.raises(ValidationError):
            completion.text = "other"

    def test_rejects_empty_text(self):
        """Test that an empty completion text is invalid."""
        with pytest.raises(ValidationError):
            _completion(text="")

    def test_rejects_zero_overlap(self):
        """Test that an overlap must cover at least the anchor character."""
        with pytest.raises(ValidationError):
            _completion(overlap=0)


class TestCompletionList:
    """Test the CompletionList collection."""

    def test_keeps_order(self):
        """Test that items keep candidate order."""
        first = _completion(
            text="john@yahoo.com", typed_text="john@", candidate="@yahoo.com", overlap=1
        )
        second = _completion(
            text="john@gmail.com", typed_text="john@", candidate="@gmail.com", overlap=1
        )
        completions = CompletionList(items=[first, second])

        assert len(completions) == 2
        assert completions[0] == first
        assert completions.texts() == ["john@yahoo.com", "john@gmail.com"]
        assert completions.top_k(1) == [first]

    def test_to_dict_list(self):
        """Test conversion to plain dictionaries."""
        completions = CompletionList(items=[_completion()])
        assert completions.to_dict_list() == [
            {
                "text": "john@example.com",
                "typed_text": "john@ex",
                "candidate": "@example.com",
                "overlap": 3,
            }
        ]

    def test_empty(self):
        """Test an empty list."""
        assert len(CompletionList()) == 0


class TestTextChanged:
    """Test the TextChanged event."""

    def test_completion_event(self):
        """Test an event carrying a completion."""
        event = TextChanged.from_completion("john@ex", _completion())
        assert event.kind == "completion"
        assert event.suggestion == "ample.com"
        assert not event.placeholder_visible

    def test_no_match_event(self):
        """Test an event without a completion."""
        event = TextChanged.from_completion("xyz", None)
        assert event.kind == "no_match"
        assert event.completion is None
        assert event.suggestion == ""
        assert not event.placeholder_visible

    def test_placeholder_visible_for_empty_text(self):
        """Test that the placeholder shows only while the text is empty."""
        event = TextChanged.from_completion("", None)
        assert event.placeholder_visible
        assert event.suggestion == ""

    def test_rejects_unknown_kind(self):
        """Test that the event kind is restricted."""
        with pytest.raises(ValidationError):
            TextChanged(kind="other", text="a")

    def test_completion_kind_requires_completion(self):
        """Test that a completion event must carry a completion."""
        with pytest.raises(ValidationError):
            TextChanged(kind="completion", text="a")

    def test_no_match_kind_rejects_completion(self):
        """Test that a no_match event cannot carry a completion."""
        with pytest.raises(ValidationError):
            TextChanged(kind="no_match", text="john@ex", completion=_completion())
