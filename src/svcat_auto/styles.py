"""Custom styling for questionary prompts.

One style and one set of glyphs shared by every interactive prompt.
"""

from questionary import Style

# ANSI 256 palette, teal accents
PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#5fd7af bold"),
        ("question", "bold"),
        ("answer", "fg:#87d7ff bold"),
        ("pointer", "fg:#87d7ff bold"),
        ("highlighted", "fg:#1c1c1c bg:#87d7ff bold"),
        ("selected", "fg:#87d787"),
        ("separator", "fg:#6c6c6c"),
        ("instruction", "fg:#6c6c6c italic"),
        ("text", ""),
        ("disabled", "fg:#585858 italic"),
        ("validation-toolbar", "fg:#ff5f5f bold"),
    ]
)

POINTER = "❯ "
QMARK = "? "
