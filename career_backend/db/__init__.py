"""
Database access layer for the Career Recommender backend.

All database operations MUST respect Row Level Security (RLS):
user_id = auth.uid(). Tables used by this service:
- profiles (id, resume_text)
- quiz_responses (user_id, question_id, answer, score)
- career_recommendations (user_id, career_title, match_score, description,
  recommended_skills, reasoning, job_type, created_at)

Older career_recommendations tables have no `reasoning` column; such
projects need a migration adding it (text, nullable) before this service
can insert rows.

Table schemas, migrations and RLS policies live with the Supabase project,
not here.
"""

from .client import get_supabase_client

__all__ = ["get_supabase_client"]
