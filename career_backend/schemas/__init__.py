"""
Pydantic schemas for API request and response validation.

All FastAPI endpoints use strict Pydantic models with explicit types.
CareerRecommendation doubles as the schema language-model output must meet.
"""
