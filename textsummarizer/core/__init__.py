"""Outcome model and response interpretation.

Composition:
    - `outcome_types`: request/outcome data contracts and the error taxonomy.
    - `interpreter`: maps transport failures and HTTP responses to outcomes.

Package import is side-effect free.
"""
