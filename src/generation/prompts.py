"""
Prompts for IELTS Academic Reading exercise generation.

One request produces one passage and one question. Each prompt includes:
1. Passage requirements (register, length, paragraph count)
2. Type-specific question guidance
3. Output format specification (mirrored by RESPONSE_SCHEMA)
"""
from __future__ import annotations

from src.reading.models import QuestionType

# =============================================================================
# System Prompt
# =============================================================================

SYSTEM_PROMPT = """You are an experienced IELTS Academic Reading examiner writing practice material.

QUALITY RULES:

1. REGISTER - Passages read like the Academic module: journals, books, magazines
   - Formal, objective, information-dense
   - No headings inside paragraphs, no bullet lists

2. EVIDENCE - The question is answerable from specific paragraphs only
   - The evidence must be locatable by scanning for keywords, names, numbers or terms
   - Paraphrase the evidence in the question; do not copy whole sentences

3. INDEXING - Paragraphs are numbered from 0 in the order you return them
   - correctParagraphIndices must point at the paragraphs that contain the evidence
   - Never reference a paragraph that does not exist
"""


# =============================================================================
# Type-specific Guidance
# =============================================================================

QUESTION_TYPE_GUIDANCE = {
    QuestionType.TRUE_FALSE_NOT_GIVEN: (
        "Write one statement about the passage. The answer is True, False or Not Given. "
        "Avoid Not Given unless a paragraph clearly discusses the topic without settling it."
    ),
    QuestionType.GAP_FILLING: (
        "Write one summary sentence with a single gap. The answer is NO MORE THAN TWO WORDS "
        "taken from the passage."
    ),
    QuestionType.MATCHING_INFORMATION: (
        "Describe one piece of information (an example, a reason, a comparison) and ask which "
        "paragraph contains it. The answer is the paragraph letter (A = index 0)."
    ),
    QuestionType.HEADING_MATCHING: (
        "Write one heading that summarises the main idea of a paragraph. The answer is the "
        "paragraph letter (A = index 0)."
    ),
    QuestionType.MULTIPLE_CHOICE: (
        "Write one question with four options labelled A-D inside questionText. "
        "The answer is the option letter."
    ),
}


EXERCISE_PROMPT = """Generate a professional IELTS Academic Reading passage of approximately 1000 words.
The passage should be formal, academic, and divided into 8-12 distinct paragraphs.
Then, generate ONE high-quality IELTS reading question of type: "{question_type}".
The question MUST have clear evidence in one or more specific paragraphs.

QUESTION GUIDANCE:
{guidance}

Return the result in JSON format:
{{
  "passage": {{
    "title": "A Compelling Academic Title",
    "paragraphs": ["Paragraph 1 content...", "Paragraph 2 content...", ...]
  }},
  "question": {{
    "type": "{question_type}",
    "questionText": "The specific question or statement to evaluate.",
    "correctParagraphIndices": [index_of_paragraph_starting_at_0],
    "explanation": "Detailed explanation in {language} of why this paragraph contains the answer, including the specific keywords used.",
    "answer": "The actual answer to the question (e.g., 'True', 'B', or the filled gap word)."
  }}
}}"""


# =============================================================================
# Structured Output Schema
# =============================================================================

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "passage": {
            "type": "OBJECT",
            "properties": {
                "title": {"type": "STRING"},
                "paragraphs": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
            "required": ["title", "paragraphs"],
        },
        "question": {
            "type": "OBJECT",
            "properties": {
                "type": {"type": "STRING"},
                "questionText": {"type": "STRING"},
                "correctParagraphIndices": {"type": "ARRAY", "items": {"type": "INTEGER"}},
                "explanation": {"type": "STRING"},
                "answer": {"type": "STRING"},
            },
            "required": ["type", "questionText", "correctParagraphIndices", "explanation", "answer"],
        },
    },
    "required": ["passage", "question"],
}


# =============================================================================
# Prompt Factory
# =============================================================================

def get_prompt(question_type: QuestionType, language: str = "Vietnamese") -> str:
    """
    Build the generation prompt for one exercise.

    Args:
        question_type: IELTS question family to ask
        language: Language the explanation should be written in

    Returns:
        Formatted prompt string
    """
    return EXERCISE_PROMPT.format(
        question_type=question_type.value,
        guidance=QUESTION_TYPE_GUIDANCE[question_type],
        language=language,
    )


def get_system_prompt() -> str:
    """Get the system prompt for LLM initialization."""
    return SYSTEM_PROMPT
