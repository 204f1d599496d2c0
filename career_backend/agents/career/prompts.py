"""
Career Recommendation Prompt Templates

Contains the system prompt and user prompt builder for the career
recommendation generator.

Architecture:
- Pattern: Single-shot LLM call (one chat-completion request)
- Provider: OpenRouter chat-completions API
- Temperature: 0.7
- Output: Bare JSON array parsed from the completion text

The generator lives in:
- career_backend/services/recommendation_service.py
"""

from typing import Any, Mapping, Sequence

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

CAREER_SYSTEM_PROMPT = (
    "You are a career counselor AI. Respond in strict JSON format only."
)

NO_RESUME_PLACEHOLDER = "No resume provided"
NO_QUIZ_PLACEHOLDER = "No quiz responses"

JOB_TYPE_CONTEXT = {
    "internship": (
        "Focus on internship opportunities that provide learning experiences "
        "and skill development for students or recent graduates."
    ),
    "full-time": (
        "Focus on full-time career opportunities for experienced "
        "professionals or career changers."
    ),
}


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def format_quiz_answers(quiz_answers: Sequence[Mapping[str, Any]]) -> str:
    """
    Flatten quiz answers into one line per answer.

    Each line reads "<question_id>: <answer> (score: <score>)". Answers are
    passed through as stored, including JSON-encoded multi-select answers.
    """
    return "\n".join(
        f"{qa.get('question_id')}: {qa.get('answer')} (score: {qa.get('score')})"
        for qa in quiz_answers
    )


def build_career_prompt(
    resume_text: str,
    quiz_answers: Sequence[Mapping[str, Any]],
    job_type: str,
) -> str:
    """
    Build the user prompt for the career recommendation call.

    Args:
        resume_text: Extracted resume text (may be empty)
        quiz_answers: Rows with question_id, answer and score (may be empty)
        job_type: "full-time" or "internship"

    Returns:
        The prompt text. It asks for exactly 3 entries as a bare JSON array.
    """
    is_internship = job_type == "internship"
    quiz_summary = format_quiz_answers(quiz_answers)

    title_hint = '(include "Intern" in the title)' if is_internship else ""
    description_hint = (
        "and learning opportunities" if is_internship else "and responsibilities"
    )
    example_title = "Career Title Intern" if is_internship else "Career Title"

    return f"""You are a career counselor AI. Based on the following user data, provide exactly 3 {job_type} career recommendations in JSON format.

JOB TYPE: {job_type.upper()}
{JOB_TYPE_CONTEXT[job_type]}

RESUME TEXT:
{resume_text or NO_RESUME_PLACEHOLDER}

QUIZ RESPONSES:
{quiz_summary or NO_QUIZ_PLACEHOLDER}

Please respond with a valid JSON array containing exactly 3 {job_type} career recommendations.
The title must be a job title that works as a LinkedIn job search query, so that openings with that title can be searched up.
Each recommendation should have:
- title: The job title {title_hint}
- match_score: An integer percentage (0-100) indicating how well this career matches
- description: A brief description of the role {description_hint}
- skills: An array of 3-5 relevant skills needed
- reasoning: A short explanation of why this {job_type} fits

Format your response as a JSON array only, no additional text:

[
  {{
    "title": "{example_title}",
    "match_score": 85,
    "description": "Brief description of the {job_type} role {description_hint}",
    "skills": ["Skill 1", "Skill 2", "Skill 3"],
    "reasoning": "Why this {job_type} matches based on resume and quiz responses"
  }}
]"""
