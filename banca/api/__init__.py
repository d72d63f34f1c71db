# Banca API
"""FastAPI service exposing the evaluator view and score submission."""
