from typing import Sequence

from hackathon_scorer.models.rubric import Criterion


def format_rubric(rubric: Sequence[Criterion]) -> str:
    """One line per criterion, weights exactly as given"""
    return "\n".join(f"- {criterion.name} | weight: {criterion.weight}" for criterion in rubric)


def get_project_scoring_prompt(
    rubric: Sequence[Criterion],
    title: str,
    url: str,
    description: str
) -> str:
    """
    Generate project scoring prompt
    """
    return f"""You are a fair hackathon judge. Score the project using this rubric.
Return STRICT JSON ONLY with schema:
{{
  "items": [ {{ "name": string, "weight": number, "score": number, "feedback": string }} ],
  "total": number
}}
Rules:
- score is 0..100 per item.
- total = sum(weight * score) on 0..100 scale.
- Use weights exactly as provided (do not renormalize).

RUBRIC:
{format_rubric(rubric)}

PROJECT:
Title: {title}
URL: {url}
Text:
<<<
{description}
>>>"""
