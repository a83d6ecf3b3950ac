import pytest
from spam_similarity.features import (
  InvalidArgumentError,
  cosine_similarity,
  text_similarity,
  word_frequencies,
)


def test_word_frequencies_lowercases_and_strips_punctuation():
  assert word_frequencies("Hello, World! hello") == {"hello": 2, "world": 1}


def test_word_frequencies_drops_non_ascii_characters():
  assert word_frequencies("Café ☕ 42") == {"caf": 1, "": 1, "42": 1}


def test_word_frequencies_counts_leading_and_inner_empty_segments():
  freqs = word_frequencies(" win  big ")
  assert freqs == {"": 2, "win": 1, "big": 1}


def test_word_frequencies_drops_trailing_punctuation_segment():
  assert word_frequencies("free iPhone now !!!") == {"free": 1, "iphone": 1, "now": 1}


@pytest.mark.parametrize("text", ["   ", "!!! ???", "🎉 🎉 "])
def test_word_frequencies_whitespace_only_has_no_words(text):
  assert word_frequencies(text) == {}


def test_word_frequencies_keeps_text_without_spaces_whole():
  assert word_frequencies("") == {"": 1}
  assert word_frequencies("!!!") == {"": 1}


def test_word_frequencies_has_no_zero_counts():
  freqs = word_frequencies("free free FREE offer")
  assert all(count >= 1 for count in freqs.values())


@pytest.mark.parametrize("bad", [None, 42, b"bytes"])
def test_word_frequencies_rejects_non_text(bad):
  with pytest.raises(InvalidArgumentError):
    word_frequencies(bad)


def test_invalid_argument_is_a_value_error():
  assert issubclass(InvalidArgumentError, ValueError)


def test_disjoint_texts_have_zero_similarity():
  assert text_similarity("apple banana", "xyz qrs") == 0.0


def test_identical_texts_have_unit_similarity():
  assert text_similarity("This is a spam mail.", "this is a SPAM mail") == pytest.approx(1.0)


def test_similarity_is_scale_invariant():
  assert text_similarity("claim your prize", "claim your prize claim your prize") == pytest.approx(1.0)


@pytest.mark.parametrize("a,b", [
  ("Get your free iPhone now!", "You have won a free iPhone!"),
  ("Short", "This is a much longer email body to test length handling."),
  ("", "hello"),
  ("a a a b", "a b b"),
])
def test_similarity_is_symmetric(a, b):
  assert text_similarity(a, b) == text_similarity(b, a)


def test_similarity_uses_full_magnitude_of_each_side():
  # dot = 1, |a| = sqrt(2), |b| = sqrt(1 + 4)
  sim = cosine_similarity({"x": 1, "y": 1}, {"x": 1, "z": 2})
  assert sim == pytest.approx(1 / (2 ** 0.5 * 5 ** 0.5))


def test_texts_without_words_have_zero_similarity():
  assert text_similarity("!!! ???", "   ") == 0.0
  assert text_similarity("   ", "   ") == 0.0


def test_trailing_punctuation_does_not_change_similarity():
  assert text_similarity("free iphone now", "free iphone now !!!") == pytest.approx(1.0)


def test_empty_vector_has_zero_similarity():
  assert cosine_similarity({}, {"hello": 1}) == 0.0
  assert cosine_similarity({"hello": 1}, {}) == 0.0
  assert cosine_similarity({}, {}) == 0.0


def test_similarity_stays_in_unit_interval():
  texts = ["", "!!!", "free iPhone", "free free iPhone", "bank account", "  spaced  out  "]
  for a in texts:
    for b in texts:
      assert 0.0 <= text_similarity(a, b) <= 1.0


def test_text_similarity_rejects_none():
  with pytest.raises(InvalidArgumentError):
    text_similarity("hello", None)
