"""Chunk splitting and folding for encoded-words (RFC 2047 §2)."""

# 30 source characters keep a fully escaped word under the 75 char limit.
MAX_CHUNK_CHARS = 30

# Header folding whitespace between consecutive encoded-words.
FOLD = "\r\n "


def split_chunks(text: str, split: bool = True, size: int = MAX_CHUNK_CHARS) -> list[str]:
    """
    Partition text into sequential chunks of at most `size` characters.
    With split disabled the whole text is a single chunk.
    """
    if not split:
        return [text]
    chunks: list[str] = []
    i = 0
    while i < len(text):
        chunks.append(text[i : i + size])
        i += size
    return chunks


def fold_words(words: list[str]) -> str:
    """Join encoded-words with CRLF SPACE, no trailing separator."""
    return FOLD.join(words)
