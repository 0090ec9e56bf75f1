"""Request envelope handling and the Reddit skill."""
