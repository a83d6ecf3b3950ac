from collections import Counter
from typing import Mapping
import re
import numpy as np

_STRIP = re.compile(r"[^a-z0-9 ]")

class InvalidArgumentError(ValueError):
  pass

def word_frequencies(text: str) -> Counter[str]:
  """Count space-delimited words after lower-casing and stripping to [a-z0-9 ].

  Empty segments from leading or repeated spaces are counted as the token "";
  trailing ones are dropped, so whitespace-only text has no words at all.
  Text with no space left after cleaning is kept whole, even when empty.
  """
  if not isinstance(text, str):
    raise InvalidArgumentError(f"text must be a str, got {type(text).__name__}")
  cleaned = _STRIP.sub("", text.lower())
  if " " not in cleaned:
    return Counter([cleaned])
  segments = cleaned.split(" ")
  while segments and segments[-1] == "":
    segments.pop()
  return Counter(segments)

def _magnitude(freqs: Mapping[str, int]) -> float:
  counts = np.fromiter(freqs.values(), dtype=float, count=len(freqs))
  return float(np.linalg.norm(counts))

def _clip01(x: float) -> float:
  return max(0.0, min(1.0, x))

def cosine_similarity(a: Mapping[str, int], b: Mapping[str, int]) -> float:
  mag_a = _magnitude(a)
  mag_b = _magnitude(b)
  if mag_a == 0 or mag_b == 0:
    return 0.0
  dot = sum(count * b.get(word, 0) for word, count in a.items())
  return _clip01(dot / (mag_a * mag_b))

def text_similarity(text1: str, text2: str) -> float:
  return cosine_similarity(word_frequencies(text1), word_frequencies(text2))
