from __future__ import annotations
from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass
import logging
import numpy as np
from .config import ThresholdConfig
from .features import InvalidArgumentError, cosine_similarity, word_frequencies

logger = logging.getLogger(__name__)

@dataclass
class MessageScore:
  index: int
  message: str
  score: float
  risk_band: str          # "high" | "medium" | "low"

def _as_batch(messages: Iterable[str]) -> list[str]:
  # row/column correspondence needs a stable order
  if isinstance(messages, (str, Set, Mapping)):
    raise InvalidArgumentError(
      f"messages must be an ordered sequence, got {type(messages).__name__}"
    )
  return list(messages)

def similarity_matrix(messages: Iterable[str]) -> np.ndarray:
  """Pairwise cosine similarity of every message against every other one.

  Rows and columns follow input position, so repeated strings keep their
  own rows. The diagonal is fixed at 1.0 and never computed.
  """
  batch = _as_batch(messages)
  n = len(batch)
  freqs = [word_frequencies(m) for m in batch]
  matrix = np.eye(n, dtype=float)
  for i in range(n):
    for j in range(i + 1, n):
      sim = cosine_similarity(freqs[i], freqs[j])
      matrix[i, j] = sim
      matrix[j, i] = sim
  return matrix

def spam_scores(messages: Iterable[str]) -> dict[int, float]:
  """Mean similarity of each message to the rest of its batch, keyed by position."""
  batch = _as_batch(messages)
  n = len(batch)
  if n == 0:
    return {}
  if n == 1:
    word_frequencies(batch[0])  # still rejects a non-str message
    # a lone message has no peers to resemble
    logger.debug("single-message batch, score fixed at 0.0")
    return {0: 0.0}

  matrix = similarity_matrix(batch)
  row_sums = matrix.sum(axis=1) - np.diag(matrix)
  scores = np.clip(row_sums / (n - 1), 0.0, 1.0)
  logger.debug("scored batch of %d messages", n)
  return {i: float(s) for i, s in enumerate(scores)}

def spam_scores_by_message(messages: Iterable[str]) -> dict[str, float]:
  """String-keyed view of spam_scores; a repeated string keeps its first score."""
  batch = _as_batch(messages)
  out: dict[str, float] = {}
  for i, score in spam_scores(batch).items():
    message = batch[i]
    if message in out:
      logger.warning("duplicate message at position %d collapsed into first occurrence", i)
      continue
    out[message] = score
  return out

def risk_band(score: float, thresholds: ThresholdConfig) -> str:
  if score >= thresholds.high_risk_min:
    return "high"
  if score >= thresholds.medium_risk_min:
    return "medium"
  return "low"

def score_batch(
    messages: Iterable[str],
    thresholds: ThresholdConfig,
) -> list[MessageScore]:
  batch = _as_batch(messages)
  scores = spam_scores(batch)
  return [
    MessageScore(
      index=i,
      message=batch[i],
      score=scores[i],
      risk_band=risk_band(scores[i], thresholds),
    )
    for i in range(len(batch))
  ]

def rank_extremes(results: Iterable[MessageScore]) -> tuple[MessageScore, MessageScore]:
  """Return (most_spammy, least_spammy); ties go to the earliest position."""
  ordered = list(results)
  if not ordered:
    raise InvalidArgumentError("cannot rank an empty batch")
  most = least = ordered[0]
  for r in ordered[1:]:
    if r.score > most.score:
      most = r
    if r.score < least.score:
      least = r
  return most, least
