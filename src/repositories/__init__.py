"""Input repositories."""

from repositories.schedule_repository import load_schedule

__all__ = ["load_schedule"]
