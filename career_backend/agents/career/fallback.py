"""
Rule-based recommendation sets.

Used whenever the language-model path is skipped or fails. Each job type
has a fixed, ranked triplet; every internship title contains "Intern".
"""

from typing import Dict, List

from career_backend.schemas.recommendations import CareerRecommendation

FALLBACK_RECOMMENDATIONS: Dict[str, List[Dict[str, object]]] = {
    "internship": [
        {
            "title": "Software Development Intern",
            "match_score": 75,
            "description": (
                "Learn software development fundamentals while working on "
                "real projects with experienced developers."
            ),
            "skills": [
                "Programming Basics",
                "Version Control",
                "Problem Solving",
                "Team Collaboration",
            ],
            "reasoning": (
                "Great entry point for learning technical skills and gaining "
                "industry experience."
            ),
        },
        {
            "title": "Business Analysis Intern",
            "match_score": 70,
            "description": (
                "Support business analysts in gathering requirements and "
                "improving business processes."
            ),
            "skills": [
                "Data Analysis",
                "Documentation",
                "Communication",
                "Process Mapping",
            ],
            "reasoning": (
                "Excellent opportunity to develop analytical and "
                "communication skills."
            ),
        },
        {
            "title": "Marketing Intern",
            "match_score": 68,
            "description": (
                "Assist with marketing campaigns, content creation, and "
                "social media management."
            ),
            "skills": [
                "Content Creation",
                "Social Media",
                "Market Research",
                "Analytics",
            ],
            "reasoning": "Perfect for developing creative and digital marketing skills.",
        },
    ],
    "full-time": [
        {
            "title": "Business Analyst",
            "match_score": 75,
            "description": (
                "Analyze business processes and requirements to drive "
                "organizational improvements."
            ),
            "skills": [
                "Data Analysis",
                "Requirements Gathering",
                "Process Improvement",
                "Documentation",
            ],
            "reasoning": (
                "A versatile role that combines analytical thinking with "
                "communication skills."
            ),
        },
        {
            "title": "Project Coordinator",
            "match_score": 70,
            "description": (
                "Support project managers in planning, executing, and "
                "monitoring project activities."
            ),
            "skills": [
                "Project Management",
                "Communication",
                "Organization",
                "Time Management",
            ],
            "reasoning": (
                "An excellent entry point for developing leadership and "
                "organizational skills."
            ),
        },
        {
            "title": "Customer Success Manager",
            "match_score": 68,
            "description": (
                "Ensure customer satisfaction and drive product adoption "
                "and retention."
            ),
            "skills": [
                "Customer Relations",
                "Communication",
                "Problem Solving",
                "Product Knowledge",
            ],
            "reasoning": (
                "Combines interpersonal skills with business acumen for "
                "customer-focused roles."
            ),
        },
    ],
}


def get_fallback_recommendations(job_type: str) -> List[CareerRecommendation]:
    """Return a fresh copy of the fixed triplet for the given job type."""
    return [
        CareerRecommendation.model_validate(entry)
        for entry in FALLBACK_RECOMMENDATIONS[job_type]
    ]
