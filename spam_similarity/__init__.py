from .config import SpamSimilarityConfig, default_config, load_config
from .features import (
  InvalidArgumentError,
  cosine_similarity,
  text_similarity,
  word_frequencies,
)
from .scoring import (
  MessageScore,
  rank_extremes,
  risk_band,
  score_batch,
  similarity_matrix,
  spam_scores,
  spam_scores_by_message,
)
from .policy import BatchGuard, BatchReport

__all__ = [
  "SpamSimilarityConfig",
  "default_config",
  "load_config",
  "InvalidArgumentError",
  "cosine_similarity",
  "text_similarity",
  "word_frequencies",
  "MessageScore",
  "rank_extremes",
  "risk_band",
  "score_batch",
  "similarity_matrix",
  "spam_scores",
  "spam_scores_by_message",
  "BatchGuard",
  "BatchReport",
]
