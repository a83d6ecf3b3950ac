from __future__ import annotations
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
import json
import logging
import uuid
from .config import SpamSimilarityConfig, default_config, load_config
from .scoring import MessageScore, rank_extremes, score_batch

logger = logging.getLogger(__name__)

@dataclass
class BatchReport:
  results: list[MessageScore]
  most_spammy: MessageScore | None
  least_spammy: MessageScore | None
  hex_trace: str          # one id per assessed batch

class BatchGuard:
  def __init__(self, config: str | SpamSimilarityConfig | None = None):
    if config is None:
      self.cfg = default_config()
    elif isinstance(config, SpamSimilarityConfig):
      self.cfg = config
    else:
      self.cfg = load_config(config)

  def assess(self, messages: Iterable[str]) -> BatchReport:
    results = score_batch(messages, self.cfg.thresholds)
    most, least = rank_extremes(results) if results else (None, None)
    report = BatchReport(
      results=results,
      most_spammy=most,
      least_spammy=least,
      hex_trace=uuid.uuid4().hex,
    )
    flagged = sum(1 for r in results if self.should_flag(r))
    logger.info(
      "assessed %d messages, %d flagged [%s]",
      len(results), flagged, report.hex_trace,
    )
    if self.cfg.logging.enable_json_logs and self.cfg.experiment.save_scores:
      self._log(report)
    return report

  def _log(self, report: BatchReport) -> None:
    record = {
      "timestamp": datetime.now(timezone.utc).isoformat(),
      "size": len(report.results),
      "scores": [
        {"index": r.index, "score": r.score, "risk_band": r.risk_band}
        for r in report.results
      ],
      "most_spammy": report.most_spammy.index if report.most_spammy else None,
      "least_spammy": report.least_spammy.index if report.least_spammy else None,
      "hex": f"{self.cfg.logging.hex_namespace}[{report.hex_trace}]",
    }
    with open(self.cfg.experiment.output_path, "a") as f:
      f.write(json.dumps(record) + "\n")

  def should_flag(self, result: MessageScore) -> bool:
    return result.risk_band == "high"
