"""Caller-side orchestration around the synchronous core."""
