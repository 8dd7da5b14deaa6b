"""Fixed word and phrase tables used by the analyzer and the rewriter.

All tables are tuples so they cannot be mutated at runtime. Tables of pairs
are applied in the order listed.
"""

from __future__ import annotations

SAMPLE_TEXT = (
    "In conclusion, we will leverage a comprehensive tapestry of insights — furthermore — "
    "to elucidate the intricate landscape \U0001f60a. Moreover, we will delve deeper to unlock "
    "unprecedented synergies."
)

# Scored as cliches by the analyzer
CLICHE_PHRASES: tuple[str, ...] = (
    "in conclusion",
    "furthermore",
    "moreover",
    "in addition",
    "at the end of the day",
    "leverage",
    "unlock synergies",
)

# Scored as buzzwords by the analyzer
BUZZWORDS: tuple[str, ...] = (
    "tapestry",
    "intricate",
    "robust",
    "scalable",
    "unprecedented",
    "synergies",
    "holistic",
    "granular",
    "delve",
)

BUZZWORD_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("leverage", "use"),
    ("robust", "reliable"),
    ("scalable", "can grow"),
    ("unprecedented", "new"),
    ("synergies", "benefits"),
    ("holistic", "overall"),
    ("granular", "detailed"),
    ("delve", "explore"),
    ("tapestry", "mix"),
    ("intricate", "complex"),
)

# Applied after BUZZWORD_REPLACEMENTS, so "unlock synergies" only survives
# that far when synergies was not already replaced.
CLICHE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("in conclusion", "overall"),
    ("furthermore", "also"),
    ("moreover", "also"),
    ("at the end of the day", "ultimately"),
    ("in addition", "also"),
    ("unlock synergies", "work well together"),
)

CONTRACTION_RULES: tuple[tuple[str, str], ...] = (
    ("do not", "don't"),
    ("are not", "aren't"),
    ("is not", "isn't"),
    ("can not", "cannot"),
    ("will not", "won't"),
    ("I am", "I'm"),
    ("we are", "we're"),
    ("you are", "you're"),
)

# Formal transitions dropped by the simplifier, mapped to what replaces them
FORMAL_TRANSITIONS: tuple[tuple[str, str], ...] = (
    ("however", "but "),
    ("therefore", ""),
    ("thus", ""),
    ("moreover", ""),
)

SYNTAX_JITTER: tuple[tuple[str, str], ...] = (
    ("also", "plus"),
    ("then", "after that"),
    ("so", "as a result"),
)

# Listed in the remote humanize prompt as phrases to avoid
AI_OVERUSED_PHRASES: tuple[str, ...] = (
    "provide a valuable insight",
    "left an indelible mark",
    "play a significant role in shaping",
    "an unwavering commitment",
    "open a new avenue",
    "a stark reminder",
    "play a crucial role in determining",
    "finding a contribution",
    "crucial role in understanding",
    "finding a shed light",
    "tapestry",
    "embark",
    "vibrant landscape",
    "delve into",
    "dive deep",
    "comprehensive",
    "seamless",
    "game-changer",
    "cutting-edge",
    "innovative solution",
)
