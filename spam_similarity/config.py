from dataclasses import dataclass
import logging
import yaml

@dataclass
class ThresholdConfig:
  high_risk_min: float
  medium_risk_min: float

  def __post_init__(self) -> None:
    if not 0.0 <= self.medium_risk_min <= self.high_risk_min <= 1.0:
      raise ValueError(
        "thresholds must satisfy 0 <= medium_risk_min <= high_risk_min <= 1, "
        f"got medium={self.medium_risk_min} high={self.high_risk_min}"
      )

@dataclass
class LoggingConfig:
  hex_namespace: str
  enable_json_logs: bool
  level: str = "WARNING"

  def __post_init__(self) -> None:
    self.level = str(self.level).upper()
    if not isinstance(logging.getLevelName(self.level), int):
      raise ValueError(f"unknown logging level: {self.level!r}")

@dataclass
class ExperimentConfig:
  save_scores: bool
  output_path: str

@dataclass
class SpamSimilarityConfig:
  thresholds: ThresholdConfig
  logging: LoggingConfig
  experiment: ExperimentConfig

def default_config() -> SpamSimilarityConfig:
  return SpamSimilarityConfig(
    thresholds=ThresholdConfig(high_risk_min=0.5, medium_risk_min=0.25),
    logging=LoggingConfig(hex_namespace="spam", enable_json_logs=False),
    experiment=ExperimentConfig(save_scores=False, output_path="scores.jsonl"),
  )

def load_config(path: str) -> SpamSimilarityConfig:
  with open(path, "r") as f:
    raw = yaml.safe_load(f)
  t = raw["thresholds"]; l = raw["logging"]; e = raw["experiment"]
  return SpamSimilarityConfig(
    thresholds=ThresholdConfig(**t),
    logging=LoggingConfig(**l),
    experiment=ExperimentConfig(**e),
  )
