"""Thai cultural context for prompts."""
