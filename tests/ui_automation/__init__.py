"""
UI Automation Tests using Playwright

Runs every row of the case table against the live transliteration app and
appends one result row per case to the results table.
"""
