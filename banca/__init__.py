# Banca
# =====
"""
Banca - evaluator portal backend.

Shows each hackathon evaluator only the groups they were assigned to in
the event spreadsheets, and stores their rubric scores.
"""

__version__ = "1.0.0"
