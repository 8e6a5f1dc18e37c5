def get_rubric_extraction_prompt(document_text: str) -> str:
    """
    Generate rubric extraction prompt
    """
    return f"""Extract a scoring rubric from the following PDF text.
Return STRICT JSON ONLY with this schema:
{{
  "criteria": [ {{ "name": string, "weight": number }} ]
}}
Rules:
- Weights must be numbers that sum to ~1 (normalize if needed).
- Keep names concise.

PDF TEXT:
<<<
{document_text}
>>>"""
