"""emojigate: lint GitHub Actions workflows for emoji-prefixed names."""

__version__ = "0.1.0"
