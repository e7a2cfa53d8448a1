"""Core domain package for bambaiyya.

Core contains vocabulary caching, slang recognition and abbreviation expansion
without any file-format or CLI-specific code, keeping the normalizer portable.
"""
