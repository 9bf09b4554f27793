from .source_poller import PollResult, PollState, SourcePoller

__all__ = ["PollResult", "PollState", "SourcePoller"]
