"""
AI components for the Career Recommender backend.

1. Career recommendation (single-shot LLM)
   - OpenRouter chat-completions call returning a JSON array
   - Fixed rule-based sets when the model path is unavailable
   - Located in: career_backend/agents/career/

Orchestration and persistence live in
career_backend/services/recommendation_service.py.
"""
