from .core import run_case, run_batch, random_secrets
from .io import write_csv, write_manifest
from .stats import summarize, pretty_stats

__all__ = ["run_case", "run_batch", "random_secrets", "write_csv", "write_manifest",
           "summarize", "pretty_stats"]
