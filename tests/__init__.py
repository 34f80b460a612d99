"""Password strength tests."""
