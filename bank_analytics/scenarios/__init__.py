"""Scenarios for generating case-study data sets."""

from bank_analytics.scenarios.case_study import CaseStudyScenario

__all__ = ["CaseStudyScenario"]
