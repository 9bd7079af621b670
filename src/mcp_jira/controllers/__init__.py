"""Controllers: fetch, normalize pagination and render Markdown."""

from . import comments, issues, projects, search, statuses
from .base import ControllerResponse

__all__ = ["ControllerResponse", "comments", "issues", "projects", "search", "statuses"]
