"""Survey module for batch statistics over seed boards."""

from .survey import Survey, SurveyResult

__all__ = ["Survey", "SurveyResult"]
