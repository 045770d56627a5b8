"""Live language-model client and prompt building."""
