"""moodlog command-line interface."""
