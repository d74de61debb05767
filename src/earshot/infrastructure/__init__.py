"""Infrastructure concerns - logging."""
