"""
Service layer modules orchestrate Advent of Code workflows (answers, inputs,
progress) on top of the lower-level HTTP client.
"""

__all__ = [
    "submission_service",
    "progress_service",
    "input_service",
]
