"""System prompts for the remote humanize and analyze features."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from data_designer_vibe_remover.lexicon import AI_OVERUSED_PHRASES

Strength = Literal["light", "medium", "strong"]

ANALYZE_SYSTEM_PROMPT = """You are an AI text analyst that identifies artificial writing patterns. Analyze the given text and provide a detailed assessment of AI-like characteristics.

Look for and report on:
1. Excessive use of emojis or inappropriate emoji placement
2. Overuse of em dashes as transitions or interruptions
3. Buzzwords and corporate jargon (leverage, robust, tapestry, etc.)
4. Cliched transitions (furthermore, moreover, in conclusion, etc.)
5. Repetitive sentence structures or word patterns
6. Overly formal or template-like language
7. Lack of natural human variation in tone and rhythm
8. Use of hashtags, rhetorical questions, asking questions and giving instant answers in the same sentence

Provide a clear, concise analysis (2-3 paragraphs) that:
- Identifies specific patterns found
- Rates the overall "AI-ness" on a scale of 1-10
- Suggests the most important areas for improvement

Be direct and helpful. Don't add disclaimers about being an AI."""

_STRENGTH_RULES: dict[str, str] = {
    "light": "Make minimal edits; fix only AI giveaways and flow.",
    "medium": "Rewrite for human voice while preserving author style where possible.",
    "strong": "Substantial rewrite for natural, human voice; keep all facts intact.",
}

_FIXED_GUIDELINES = (
    "Fact-check all claims and avoid making unsupported or generic statements. Replace vague "
    "expert-sounding claims with specific, verifiable information.",
    "Be specific and use rich, descriptive words instead of vague or generic language. Avoid empty "
    "statements that sound authoritative but lack substance.",
    "Favor active voice over passive voice and use first-person perspective when appropriate to "
    "increase engagement and authenticity.",
    "Incorporate storytelling elements, personal anecdotes, or concrete examples to make the content "
    "more relatable and emotionally engaging.",
    "Replace formulaic third-person descriptions with conversational, engaging language that speaks "
    "directly to the reader.",
    "Add authentic emotion and genuine insight rather than just listing facts or information.",
    "Use casual, conversational language that connects with the audience rather than overly formal "
    "or academic tone.",
    "Preserve the original meaning, facts, and intent. Do not invent or alter factual details.",
    "Keep formatting and markdown if present. Leave code blocks unchanged unless explicitly instructed.",
    "Do not use hashtags, rhetorical questions, or answer questions immediately after asking them in "
    "the same sentence.",
)

_PREAMBLE = """Rewrite the user's text to read like natural human writing that demonstrates expertise, experience, authoritativeness, and trustworthiness (E-E-A-T). Transform formulaic AI content into engaging, authentic human communication.

Key Strategies for Humanization:
1. Sentence Structure: Vary sentence length dramatically - mix short, punchy statements with longer, flowing sentences to create natural rhythm
2. Voice & Perspective: Use active voice and first-person when appropriate; avoid monotonous third-person descriptions
3. Storytelling: Incorporate narrative elements, concrete examples, and personal insights to create emotional connection
4. Authenticity: Replace generic expert-sounding phrases with specific, nuanced analysis that shows deep understanding
5. Engagement: Write conversationally, as if speaking directly to the reader, not delivering a formal presentation"""

_CLOSING = (
    'Replace AI "hallmark phrases" with original, human expressions that convey the same meaning more naturally',
    "Ensure the rewritten content demonstrates genuine expertise rather than surface-level knowledge",
    "Do not add disclaimers. Output only the rewritten text, nothing else.",
)


@dataclass(frozen=True)
class HumanizeRequest:
    """Instructions for a remote rewrite."""

    target_tone: str = "neutral"
    remove_emojis: bool = True
    limit_em_dashes: bool = True
    reduce_buzzwords: bool = True
    vary_sentence_length: bool = True
    simplify_cliches: bool = True
    strength: Strength = "medium"


def build_humanize_prompt(request: HumanizeRequest) -> str:
    """Render the system prompt for a remote humanize call."""
    avoided = ", ".join(AI_OVERUSED_PHRASES[:10])
    constraints = [
        f"Adopt a {request.target_tone} tone and tailor the voice to sound natural and engaging.",
        "Remove all emojis unless they are essential for meaning."
        if request.remove_emojis
        else "Keep only meaningful emojis; do not add new ones.",
        "Limit the use of em dashes; prefer commas, periods, or parentheses for clarity."
        if request.limit_em_dashes
        else "Use em dashes only when they genuinely improve readability.",
        f"Eliminate buzzwords, boilerplate, and overused AI phrases. Specifically avoid: {avoided}. "
        "Use specific, concrete language instead."
        if request.reduce_buzzwords
        else "Avoid jargon unless it is necessary for the topic or audience.",
        "Vary sentence length and structure significantly to avoid repetitive or formulaic patterns. "
        "Mix short punchy sentences with longer, complex ones to create natural rhythm."
        if request.vary_sentence_length
        else "Maintain a natural flow and avoid robotic or monotonous cadence.",
        "Replace cliches and canned transitions with direct, original phrasing. Avoid generic metaphors "
        "and overused comparisons."
        if request.simplify_cliches
        else "Avoid overly formal or template-like transitions.",
        *_FIXED_GUIDELINES,
        _STRENGTH_RULES.get(request.strength, _STRENGTH_RULES["medium"]),
        *_CLOSING,
    ]
    return _PREAMBLE + "\n\nGuidelines:\n" + "\n".join(f"- {c}" for c in constraints)
