"""Home Office Tracker - record and export the days you worked from home."""
