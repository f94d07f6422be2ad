"""Binary-search algorithms and palindrome, parenthesis and substring-beauty functions."""

__version__ = "0.1.0"