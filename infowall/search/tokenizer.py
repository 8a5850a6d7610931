"""
Query Tokenizer - Split a raw filter query into words.
"""


def tokenize(query: str) -> list[str]:
    """
    Split a query on single spaces and drop blank tokens.

    Only the space character separates words; tabs and other whitespace
    stay inside a word. The empty query yields no words.

    Example:
        tokenize("red  apple ") -> ["red", "apple"]
    """
    return [word for word in query.split(" ") if word.strip() != ""]
