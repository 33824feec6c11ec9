"""Local token counting, encoding and decoding for the GPT-2/GPT-3 encoding."""
