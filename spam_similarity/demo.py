import argparse
import logging
import sys
from .policy import BatchGuard

def main(argv: list[str] | None = None) -> int:
  messages = [
    "Congratulations! You have won a free iPhone!",
    "Your bank account has been flagged for suspicious activity.",
    "You are a winner! Get your free iPhone now!",
    "Important update: Your account requires verification.",
    "Don't miss this chance to claim your prize!",
    "This is a final reminder: Your subscription is about to expire.",
    "Earn money from home with just a few clicks!",
    "Your Amazon order #12345 has been shipped. Track it here.",
    "Upgrade your account today to enjoy premium features.",
    "Get the latest iPhone for just $1! Limited time offer.",
  ]

  parser = argparse.ArgumentParser(
    description="Score sample emails by their similarity to the rest of the batch."
  )
  parser.add_argument(
    "--config",
    default=None,
    help="Path to a YAML config file (default: built-in settings)",
  )
  parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log debug output to stderr",
  )
  args = parser.parse_args(argv)

  guard = BatchGuard(args.config)
  level = logging.DEBUG if args.verbose else guard.cfg.logging.level
  logging.basicConfig(level=level, stream=sys.stderr)

  report = guard.assess(messages)
  for r in report.results:
    print(f'Email: "{r.message}"')
    print(f"Spam Probability: {r.score:.4f} ({r.risk_band})\n")

  print(f'Most Spammy Email: "{report.most_spammy.message}"')
  print(f'Least Spammy Email: "{report.least_spammy.message}"')
  return 0

if __name__ == "__main__":
  sys.exit(main())
