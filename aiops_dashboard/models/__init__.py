"""
Data models for the dashboard.

- ReviewRecord: a review exactly as delivered by the backend
- FilterCriteria: the operator's current filter selection
- Summary types: counts, aspect stats, KPI cards and filter results
"""
