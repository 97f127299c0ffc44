"""
Reports App - Summary, period reports and period deletion

Read-side views over trips and diesel expenses: the running paid/pending
summary, period reports with CSV and PDF export, and the bulk delete of a
date range.
"""
