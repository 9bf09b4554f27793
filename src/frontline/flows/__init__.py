from .sweep import SweepSummary, fetch_covers, run_sweep, summarize, sync

__all__ = ["SweepSummary", "fetch_covers", "run_sweep", "summarize", "sync"]
